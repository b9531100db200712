from .slot_presenter import InventorySlotPresenter, SlotView

__all__ = ['InventorySlotPresenter', 'SlotView']

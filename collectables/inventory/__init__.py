from .events import LedgerEvent, NotificationChannel
from .ledger import InventoryLedger, InvalidAmountError, Stack

__all__ = [
    'LedgerEvent',
    'NotificationChannel',
    'InventoryLedger',
    'InvalidAmountError',
    'Stack',
]

from .bool_clause import BoolClause as BoolClause
from .unknown_slot_policy import UnknownSlotPolicy as UnknownSlotPolicy

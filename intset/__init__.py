from .base import IntSet, equal
from .base import IntSetError, IntSetCapacityExceeded, IntSetValueTypeError, IntSetConfigError
from .config import DefaultConfigLoader, IntSetSettings, load_intset_class

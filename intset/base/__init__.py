from .exceptions import IntSetError, IntSetCapacityExceeded, IntSetValueTypeError, IntSetConfigError
from .intset import IntSet, equal

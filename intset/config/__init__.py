from .defaultconfigloader import DefaultConfigLoader
from .settings import IntSetSettings, load_intset_class

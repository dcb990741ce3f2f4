
from .content import *
from .fetch import *
from .spread import *
from .source import *


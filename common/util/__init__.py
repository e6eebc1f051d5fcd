from .database import *
from .response import *


class EggError(Exception):
    """ Base class for all Egg errors"""
    pass

class EggSyntaxError(EggError):
    """ Raised when source text or a special form is malformed"""

class EggIncompleteInput(EggSyntaxError):
    """ Raised when the source ends before the expression is complete"""

class EggReferenceError(EggError):
    """ Raised when a name is read or set before it is defined"""

class EggTypeError(EggError):
    """ Raised when a value of the wrong kind is applied or passed to a builtin"""

class EggArityError(EggTypeError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class EggIndexError(EggError):
    """ Raised when an array index is out of range"""

class SchemeError(Exception):
    """ Base class for all Scheme errors"""
    pass

class SchemeLexError(SchemeError):
    """ Raised when the lexer produced an unknown token"""

class SchemeParseError(SchemeError):
    """ Raised on malformed structure: stray ')', premature end of input"""

class SchemeUnsupportedLiteral(SchemeParseError):
    """ Raised for literal kinds that are lexed but not supported yet (float, char, ...)"""

class SchemeUnboundName(SchemeError):
    """ Raised when an atom is not bound in any environment frame"""

class SchemeArityError(SchemeError):
    """ Raised when the number of operands passed to a procedure is incorrect"""

class SchemeTypeError(SchemeError):
    """ Raised when an operand has the wrong kind"""

class SchemeUnspecifiedReturn(SchemeError):
    """ Raised when an expression has no value, e.g. a two-armed if whose condition is false"""

class SchemeOverflowError(SchemeError):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""

class SchemeEnvironmentError(SchemeError):
    """ Raised when the environment is misused, e.g. popping the root frame"""

class SchemeAssemblyError(SchemeError):
    """ Raised when the assembly builder is used out of order"""

class SchemeRecursionError(SchemeError):
    """ Raised when evaluation exhausts the host call stack"""

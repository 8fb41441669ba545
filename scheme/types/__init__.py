from scheme.types.symbol import Symbol
from scheme.types.function import Function
from scheme.types.environment import Environment

__all__ = ["Symbol", "Function", "Environment"]

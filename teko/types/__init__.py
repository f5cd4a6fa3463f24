from teko.types.symbol import Symbol
from teko.types.null import Null, NullType
from teko.types.number import Gaussian
from teko.types.closure import Function, Macro, Primitive, PrimitiveMacro
from teko.types.error_value import Error
from teko.types.environment import Environment, Cell

__all__ = [
    "Symbol", "Null", "NullType", "Gaussian",
    "Function", "Macro", "Primitive", "PrimitiveMacro",
    "Error", "Environment", "Cell",
]

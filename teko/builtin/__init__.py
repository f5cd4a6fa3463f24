from teko.builtin.env_builtin import register as register_primitives
from teko.builtin.macro_builtin import register as register_macros

__all__ = ["register_primitives", "register_macros"]

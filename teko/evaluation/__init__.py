from teko.evaluation.evaluator import Evaluator
from teko.evaluation.frames import Unwound

__all__ = ["Evaluator", "Unwound"]

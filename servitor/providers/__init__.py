from .alpha import ServitorAlpha
from .beta  import ServitorBeta

__all__ = ["ServitorAlpha", "ServitorBeta"]

"""Main window mixins for the Ellipse Transform Editor"""

from .config_mixin import ConfigMixin

__all__ = ['ConfigMixin']

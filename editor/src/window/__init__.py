"""Main window mixins for Canvas Shape Demos"""

from .config_mixin import ConfigMixin, load_config
from .ui_setup_mixin import UISetupMixin

__all__ = ['ConfigMixin', 'UISetupMixin', 'load_config']

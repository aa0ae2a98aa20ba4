"""Declaration builder: doc capture, declaration forms and finalization."""

from .lib import AssignBuilder, caller_site, merge_options, option_name

__all__ = ["AssignBuilder", "caller_site", "merge_options", "option_name"]

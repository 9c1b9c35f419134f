"""CLI command implementations."""

from cidispatch.commands.dispatch import cmd_dispatch
from cidispatch.commands.handle_comment import cmd_handle_comment
from cidispatch.commands.parse_comment import cmd_parse_comment
from cidispatch.commands.update_comment import cmd_update_comment

__all__ = [
    "cmd_dispatch",
    "cmd_handle_comment",
    "cmd_parse_comment",
    "cmd_update_comment",
]

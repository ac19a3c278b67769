"""Input loaders."""

from sepa_ct.infrastructure.loaders.json_loader import MessageInput, load_message_file

__all__ = ["MessageInput", "load_message_file"]

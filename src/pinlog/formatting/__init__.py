"""Item formatting exports."""

from pinlog.formatting.directory import MemberDirectory
from pinlog.formatting.formatter import ItemFormatter, parse_pinned_item, substitute_mentions, unescape_message_text

__all__ = ["ItemFormatter", "MemberDirectory", "parse_pinned_item", "substitute_mentions", "unescape_message_text"]

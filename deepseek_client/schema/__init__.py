from .completion import ChatCompletion, ChatMessage, Choice, Usage, parse_completion

__all__ = ["ChatCompletion", "ChatMessage", "Choice", "Usage", "parse_completion"]

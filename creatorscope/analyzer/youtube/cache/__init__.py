from .channel_id_cache import ChannelIdCache

__all__ = ["ChannelIdCache"]

"""Simplified Vulkan synchronization: access types mapped to pipeline barriers and events."""

__version__ = "0.1.6"

__all__ = ["access", "barriers", "cmd", "vk"]
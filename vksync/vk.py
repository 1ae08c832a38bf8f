"""Vulkan flag, layout and barrier types used by the synchronization helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag


class PipelineStageFlags(IntFlag):
    """Pipeline stage bits (``VkPipelineStageFlagBits``)."""

    TOP_OF_PIPE = 0x1
    DRAW_INDIRECT = 0x2
    VERTEX_INPUT = 0x4
    VERTEX_SHADER = 0x8
    TESSELLATION_CONTROL_SHADER = 0x10
    TESSELLATION_EVALUATION_SHADER = 0x20
    GEOMETRY_SHADER = 0x40
    FRAGMENT_SHADER = 0x80
    EARLY_FRAGMENT_TESTS = 0x100
    LATE_FRAGMENT_TESTS = 0x200
    COLOR_ATTACHMENT_OUTPUT = 0x400
    COMPUTE_SHADER = 0x800
    TRANSFER = 0x1000
    BOTTOM_OF_PIPE = 0x2000
    HOST = 0x4000
    ALL_GRAPHICS = 0x8000
    ALL_COMMANDS = 0x10000
    COMMAND_PREPROCESS_NV = 0x20000


class AccessFlags(IntFlag):
    """Memory access bits (``VkAccessFlagBits``)."""

    INDIRECT_COMMAND_READ = 0x1
    INDEX_READ = 0x2
    VERTEX_ATTRIBUTE_READ = 0x4
    UNIFORM_READ = 0x8
    INPUT_ATTACHMENT_READ = 0x10
    SHADER_READ = 0x20
    SHADER_WRITE = 0x40
    COLOR_ATTACHMENT_READ = 0x80
    COLOR_ATTACHMENT_WRITE = 0x100
    DEPTH_STENCIL_ATTACHMENT_READ = 0x200
    DEPTH_STENCIL_ATTACHMENT_WRITE = 0x400
    TRANSFER_READ = 0x800
    TRANSFER_WRITE = 0x1000
    HOST_READ = 0x2000
    HOST_WRITE = 0x4000
    MEMORY_READ = 0x8000
    MEMORY_WRITE = 0x10000
    COMMAND_PREPROCESS_READ_NV = 0x20000
    COMMAND_PREPROCESS_WRITE_NV = 0x40000


class VkImageLayout(IntEnum):
    """Native image layouts (``VkImageLayout``)."""

    UNDEFINED = 0
    GENERAL = 1
    COLOR_ATTACHMENT_OPTIMAL = 2
    DEPTH_STENCIL_ATTACHMENT_OPTIMAL = 3
    DEPTH_STENCIL_READ_ONLY_OPTIMAL = 4
    SHADER_READ_ONLY_OPTIMAL = 5
    TRANSFER_SRC_OPTIMAL = 6
    TRANSFER_DST_OPTIMAL = 7
    PREINITIALIZED = 8
    DEPTH_READ_ONLY_STENCIL_ATTACHMENT_OPTIMAL = 1000117000
    DEPTH_ATTACHMENT_STENCIL_READ_ONLY_OPTIMAL = 1000117001
    PRESENT_SRC_KHR = 1000001002
    SHARED_PRESENT_KHR = 1000111000


@dataclass(frozen=True)
class ImageSubresourceRange:
    """The set of mip levels and array layers an image barrier applies to."""

    aspect_mask: int = 0
    base_mip_level: int = 0
    level_count: int = 0
    base_array_layer: int = 0
    layer_count: int = 0


@dataclass
class MemoryBarrier:
    """A global memory barrier."""

    src_access_mask: AccessFlags = AccessFlags(0)
    dst_access_mask: AccessFlags = AccessFlags(0)


@dataclass
class BufferMemoryBarrier:
    """A memory barrier on a range of one buffer."""

    src_access_mask: AccessFlags = AccessFlags(0)
    dst_access_mask: AccessFlags = AccessFlags(0)
    src_queue_family_index: int = 0
    dst_queue_family_index: int = 0
    buffer: int = 0
    offset: int = 0
    size: int = 0


@dataclass
class ImageMemoryBarrier:
    """A memory barrier on a subresource range of one image."""

    src_access_mask: AccessFlags = AccessFlags(0)
    dst_access_mask: AccessFlags = AccessFlags(0)
    old_layout: VkImageLayout = VkImageLayout.UNDEFINED
    new_layout: VkImageLayout = VkImageLayout.UNDEFINED
    src_queue_family_index: int = 0
    dst_queue_family_index: int = 0
    image: int = 0
    subresource_range: ImageSubresourceRange = field(default_factory=ImageSubresourceRange)
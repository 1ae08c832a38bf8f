"""Barrier descriptions and their translation into native Vulkan barriers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from vksync.access import AccessType, ImageLayout, get_access_info, is_write_access
from vksync.vk import (
    AccessFlags,
    BufferMemoryBarrier,
    ImageMemoryBarrier,
    ImageSubresourceRange,
    MemoryBarrier,
    PipelineStageFlags,
    VkImageLayout,
)


class UnsupportedLayoutError(NotImplementedError):
    """Raised when an image layout option has no mapping yet."""


def _freeze(accesses: Iterable[AccessType]) -> tuple[AccessType, ...]:
    return tuple(AccessType(access) for access in accesses)


@dataclass(frozen=True)
class GlobalBarrier:
    """Previous and next accesses of every resource the barrier affects."""

    previous_accesses: tuple[AccessType, ...] = ()
    next_accesses: tuple[AccessType, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "previous_accesses", _freeze(self.previous_accesses))
        object.__setattr__(self, "next_accesses", _freeze(self.next_accesses))


@dataclass(frozen=True)
class BufferBarrier:
    """Accesses on one buffer range, for queue family ownership transfers."""

    previous_accesses: tuple[AccessType, ...] = ()
    next_accesses: tuple[AccessType, ...] = ()
    src_queue_family_index: int = 0
    dst_queue_family_index: int = 0
    buffer: int = 0
    offset: int = 0
    size: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "previous_accesses", _freeze(self.previous_accesses))
        object.__setattr__(self, "next_accesses", _freeze(self.next_accesses))


@dataclass(frozen=True)
class ImageBarrier:
    """Accesses on one image subresource range, with optional layout transition."""

    previous_accesses: tuple[AccessType, ...] = ()
    next_accesses: tuple[AccessType, ...] = ()
    previous_layout: ImageLayout = ImageLayout.OPTIMAL
    next_layout: ImageLayout = ImageLayout.OPTIMAL
    discard_contents: bool = False
    src_queue_family_index: int = 0
    dst_queue_family_index: int = 0
    image: int = 0
    range: ImageSubresourceRange = field(default_factory=ImageSubresourceRange)

    def __post_init__(self) -> None:
        object.__setattr__(self, "previous_accesses", _freeze(self.previous_accesses))
        object.__setattr__(self, "next_accesses", _freeze(self.next_accesses))


def _stages_and_masks(
    previous_accesses: Iterable[AccessType],
    next_accesses: Iterable[AccessType],
) -> tuple[PipelineStageFlags, PipelineStageFlags, AccessFlags, AccessFlags]:
    src_stages = PipelineStageFlags(0)
    dst_stages = PipelineStageFlags(0)
    src_access = AccessFlags(0)
    dst_access = AccessFlags(0)

    for access in previous_accesses:
        info = get_access_info(access)
        src_stages |= info.stage_mask
        # Availability operations are only needed for writes.
        if is_write_access(access):
            src_access |= info.access_mask

    for access in next_accesses:
        info = get_access_info(access)
        dst_stages |= info.stage_mask
        # Without prior writes this is a WAR (or RAR) hazard: no visibility needed.
        if src_access:
            dst_access |= info.access_mask

    return (
        src_stages or PipelineStageFlags.TOP_OF_PIPE,
        dst_stages or PipelineStageFlags.BOTTOM_OF_PIPE,
        src_access,
        dst_access,
    )


def _resolve_layout(layout: ImageLayout, access: AccessType) -> VkImageLayout:
    if layout is ImageLayout.GENERAL:
        if AccessType(access) is AccessType.PRESENT:
            return VkImageLayout.PRESENT_SRC_KHR
        return VkImageLayout.GENERAL
    if layout is ImageLayout.OPTIMAL:
        return get_access_info(access).image_layout
    raise UnsupportedLayoutError(f"image layout {layout.name} is not supported")


def get_memory_barrier(
    barrier: GlobalBarrier,
) -> tuple[PipelineStageFlags, PipelineStageFlags, MemoryBarrier]:
    """Translate a global barrier into source stages, destination stages and a memory barrier."""
    src_stages, dst_stages, src_access, dst_access = _stages_and_masks(
        barrier.previous_accesses, barrier.next_accesses
    )
    return src_stages, dst_stages, MemoryBarrier(src_access, dst_access)


def get_buffer_memory_barrier(
    barrier: BufferBarrier,
) -> tuple[PipelineStageFlags, PipelineStageFlags, BufferMemoryBarrier]:
    """Translate a buffer barrier into source stages, destination stages and a buffer barrier."""
    src_stages, dst_stages, src_access, dst_access = _stages_and_masks(
        barrier.previous_accesses, barrier.next_accesses
    )
    native = BufferMemoryBarrier(
        src_access_mask=src_access,
        dst_access_mask=dst_access,
        src_queue_family_index=barrier.src_queue_family_index,
        dst_queue_family_index=barrier.dst_queue_family_index,
        buffer=barrier.buffer,
        offset=barrier.offset,
        size=barrier.size,
    )
    return src_stages, dst_stages, native


def get_image_memory_barrier(
    barrier: ImageBarrier,
) -> tuple[PipelineStageFlags, PipelineStageFlags, ImageMemoryBarrier]:
    """Translate an image barrier into source stages, destination stages and an image barrier.

    Raises UnsupportedLayoutError for ``ImageLayout.GENERAL_AND_PRESENTATION``.
    """
    src_stages, dst_stages, src_access, dst_access = _stages_and_masks(
        barrier.previous_accesses, barrier.next_accesses
    )

    old_layout = VkImageLayout.UNDEFINED
    if not barrier.discard_contents:
        for access in barrier.previous_accesses:
            old_layout = _resolve_layout(barrier.previous_layout, access)

    new_layout = VkImageLayout.UNDEFINED
    for access in barrier.next_accesses:
        new_layout = _resolve_layout(barrier.next_layout, access)

    native = ImageMemoryBarrier(
        src_access_mask=src_access,
        dst_access_mask=dst_access,
        old_layout=old_layout,
        new_layout=new_layout,
        src_queue_family_index=barrier.src_queue_family_index,
        dst_queue_family_index=barrier.dst_queue_family_index,
        image=barrier.image,
        subresource_range=barrier.range,
    )
    return src_stages, dst_stages, native
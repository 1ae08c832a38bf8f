"""Command recording helpers built on the barrier mappings."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

from vksync.access import AccessType, get_access_info
from vksync.barriers import (
    BufferBarrier,
    GlobalBarrier,
    ImageBarrier,
    get_buffer_memory_barrier,
    get_image_memory_barrier,
    get_memory_barrier,
)
from vksync.vk import (
    BufferMemoryBarrier,
    ImageMemoryBarrier,
    MemoryBarrier,
    PipelineStageFlags,
)


@dataclass(frozen=True)
class _RecordedCommand:
    name: str
    args: dict[str, Any]


@dataclass
class Device:
    """A device that records the synchronization commands issued to it.

    Subclass and override the ``cmd_*`` methods to forward them to a real API.
    """

    commands: list[_RecordedCommand] = field(default_factory=list)

    def _record(self, name: str, **args: Any) -> None:
        self.commands.append(_RecordedCommand(name, args))

    def cmd_pipeline_barrier(
        self,
        command_buffer,
        src_stage_mask,
        dst_stage_mask,
        dependency_flags,
        memory_barriers,
        buffer_barriers,
        image_barriers,
    ) -> None:
        """Record a pipeline barrier."""
        self._record(
            "pipeline_barrier",
            command_buffer=command_buffer,
            src_stage_mask=src_stage_mask,
            dst_stage_mask=dst_stage_mask,
            dependency_flags=dependency_flags,
            memory_barriers=list(memory_barriers),
            buffer_barriers=list(buffer_barriers),
            image_barriers=list(image_barriers),
        )

    def cmd_set_event(self, command_buffer, event, stage_mask) -> None:
        """Record setting an event."""
        self._record("set_event", command_buffer=command_buffer, event=event, stage_mask=stage_mask)

    def cmd_reset_event(self, command_buffer, event, stage_mask) -> None:
        """Record resetting an event."""
        self._record("reset_event", command_buffer=command_buffer, event=event, stage_mask=stage_mask)

    def cmd_wait_events(
        self,
        command_buffer,
        events,
        src_stage_mask,
        dst_stage_mask,
        memory_barriers,
        buffer_barriers,
        image_barriers,
    ) -> None:
        """Record waiting on events."""
        self._record(
            "wait_events",
            command_buffer=command_buffer,
            events=list(events),
            src_stage_mask=src_stage_mask,
            dst_stage_mask=dst_stage_mask,
            memory_barriers=list(memory_barriers),
            buffer_barriers=list(buffer_barriers),
            image_barriers=list(image_barriers),
        )


def _collect_barriers(
    global_barrier: GlobalBarrier | None,
    buffer_barriers: Iterable[BufferBarrier],
    image_barriers: Iterable[ImageBarrier],
) -> tuple[
    PipelineStageFlags,
    PipelineStageFlags,
    list[MemoryBarrier],
    list[BufferMemoryBarrier],
    list[ImageMemoryBarrier],
]:
    src_stage_mask = PipelineStageFlags.TOP_OF_PIPE
    dst_stage_mask = PipelineStageFlags.BOTTOM_OF_PIPE
    memory: list[MemoryBarrier] = []
    buffers: list[BufferMemoryBarrier] = []
    images: list[ImageMemoryBarrier] = []

    if global_barrier is not None:
        src, dst, native = get_memory_barrier(global_barrier)
        src_stage_mask |= src
        dst_stage_mask |= dst
        memory.append(native)

    for barrier in buffer_barriers:
        src, dst, native_buffer = get_buffer_memory_barrier(barrier)
        src_stage_mask |= src
        dst_stage_mask |= dst
        buffers.append(native_buffer)

    for barrier in image_barriers:
        src, dst, native_image = get_image_memory_barrier(barrier)
        src_stage_mask |= src
        dst_stage_mask |= dst
        images.append(native_image)

    return src_stage_mask, dst_stage_mask, memory, buffers, images


def _event_stage_mask(previous_accesses: Iterable[AccessType]) -> PipelineStageFlags:
    stage_mask = PipelineStageFlags.TOP_OF_PIPE
    for access in previous_accesses:
        stage_mask |= get_access_info(access).stage_mask
    return stage_mask


def pipeline_barrier(
    device: Device,
    command_buffer,
    global_barrier: GlobalBarrier | None = None,
    buffer_barriers: Sequence[BufferBarrier] = (),
    image_barriers: Sequence[ImageBarrier] = (),
) -> None:
    """Translate the barriers and issue them as one pipeline barrier."""
    src, dst, memory, buffers, images = _collect_barriers(
        global_barrier, buffer_barriers, image_barriers
    )
    device.cmd_pipeline_barrier(command_buffer, src, dst, 0, memory, buffers, images)


def set_event(device: Device, command_buffer, event, previous_accesses: Iterable[AccessType]) -> None:
    """Set ``event`` once the accesses in ``previous_accesses`` complete."""
    device.cmd_set_event(command_buffer, event, _event_stage_mask(previous_accesses))


def reset_event(device: Device, command_buffer, event, previous_accesses: Iterable[AccessType]) -> None:
    """Reset ``event`` once the accesses in ``previous_accesses`` complete."""
    device.cmd_reset_event(command_buffer, event, _event_stage_mask(previous_accesses))


def wait_events(
    device: Device,
    command_buffer,
    events: Sequence,
    global_barrier: GlobalBarrier | None = None,
    buffer_barriers: Sequence[BufferBarrier] = (),
    image_barriers: Sequence[ImageBarrier] = (),
) -> None:
    """Translate the barriers and wait on ``events`` with them."""
    src, dst, memory, buffers, images = _collect_barriers(
        global_barrier, buffer_barriers, image_barriers
    )
    device.cmd_wait_events(command_buffer, events, src, dst, memory, buffers, images)
# vksync

A small library that makes Vulkan synchronization easier to get right.

Vulkan asks you to assemble pipeline stage masks, access masks and image
layouts by hand, and many combinations are wrong. `vksync` shrinks this
down to about fifty access types (`AccessType`) and three image layout
modes (`ImageLayout`). You say what a resource was used for before and
what it will be used for next. The library works out the source and
destination pipeline stages, the access masks and the image layouts.

Semaphores, fences and render passes are out of scope.

## Installation

```
pip install vksync
```

The package has no runtime dependencies.

## Modules

- `vksync.vk` – the Vulkan values the library produces: `PipelineStageFlags`
  and `AccessFlags` (`IntFlag`s), `VkImageLayout` (`IntEnum`), and the
  dataclasses `ImageSubresourceRange`, `MemoryBarrier`,
  `BufferMemoryBarrier` and `ImageMemoryBarrier`. Their numeric values
  match the Vulkan specification.
- `vksync.access` – `AccessType`, `ImageLayout`, and the lookups
  `get_access_info(access_type)` (returns an `AccessInfo` with
  `stage_mask`, `access_mask` and `image_layout`) and
  `is_write_access(access_type)`.
- `vksync.barriers` – the barrier descriptions and their translation.
- `vksync.cmd` – helpers that combine barriers and hand them to a device.

## Mapping barriers

Describe a dependency with one of the barrier types below:

- `GlobalBarrier` covers all resources at once. Use it whenever no queue
  ownership transfer and no layout transition is needed.
- `BufferBarrier` covers a range of one buffer (`buffer`, `offset`, `size`).
  Use it when a queue family ownership transfer is needed.
- `ImageBarrier` covers a subresource range of one image (`image`, `range`).
  Use it for layout transitions and ownership transfers.

All three are frozen dataclasses; the access lists you pass are stored as
tuples of `AccessType`.

Then translate the barrier into Vulkan terms:

```python
from vksync.access import AccessType
from vksync.barriers import GlobalBarrier, get_memory_barrier
from vksync.vk import AccessFlags, PipelineStageFlags

barrier = GlobalBarrier(
    previous_accesses=[AccessType.COMPUTE_SHADER_WRITE],
    next_accesses=[AccessType.INDEX_BUFFER],
)
src_stages, dst_stages, memory_barrier = get_memory_barrier(barrier)

assert src_stages == PipelineStageFlags.COMPUTE_SHADER
assert dst_stages == PipelineStageFlags.VERTEX_INPUT
assert memory_barrier.src_access_mask == AccessFlags.SHADER_WRITE
assert memory_barrier.dst_access_mask == AccessFlags.INDEX_READ
```

`get_buffer_memory_barrier` works the same way for a `BufferBarrier`.
Image barriers also work out the old and new layouts:

```python
from vksync.access import AccessType, ImageLayout
from vksync.barriers import ImageBarrier, get_image_memory_barrier
from vksync.vk import VkImageLayout

barrier = ImageBarrier(
    previous_accesses=[AccessType.COLOR_ATTACHMENT_WRITE],
    next_accesses=[AccessType.PRESENT],
    previous_layout=ImageLayout.OPTIMAL,
    next_layout=ImageLayout.OPTIMAL,
)
src, dst, image_barrier = get_image_memory_barrier(barrier)

assert image_barrier.old_layout == VkImageLayout.COLOR_ATTACHMENT_OPTIMAL
assert image_barrier.new_layout == VkImageLayout.PRESENT_SRC_KHR
```

With `ImageLayout.OPTIMAL` each access picks its own optimal layout; with
`ImageLayout.GENERAL` the layout is `GENERAL`, or `PRESENT_SRC_KHR` for
`AccessType.PRESENT`. Where several accesses are listed, the last one
decides the layout. Setting `discard_contents=True` makes the old layout
`UNDEFINED`, so the image's previous contents are thrown away. The
`ImageLayout.GENERAL_AND_PRESENTATION` mode is not supported yet and raises
`UnsupportedLayoutError` (a `NotImplementedError`).

Stage masks are never left empty. When no stages are found, the source
stage becomes `TOP_OF_PIPE` and the destination stage becomes
`BOTTOM_OF_PIPE`. Source access masks only include write accesses, and
destination access masks are only filled in when a previous access wrote
to memory.

## Recording commands

The `vksync.cmd` module combines barriers and passes the result to a
device object:

- `pipeline_barrier(device, command_buffer, global_barrier=None, buffer_barriers=(), image_barriers=())`
- `set_event(device, command_buffer, event, previous_accesses)`
- `reset_event(device, command_buffer, event, previous_accesses)`
- `wait_events(device, command_buffer, events, global_barrier=None, buffer_barriers=(), image_barriers=())`

The combined source stage mask always includes `TOP_OF_PIPE` and the
destination stage mask always includes `BOTTOM_OF_PIPE`. Pipeline barriers
are issued with dependency flags `0`.

`vksync.cmd.Device` calls these through its methods `cmd_pipeline_barrier`,
`cmd_set_event`, `cmd_reset_event` and `cmd_wait_events`. The stock
`Device` only appends each call to its `commands` list, each entry holding
the command's `name` and its `args`:

```python
from vksync.access import AccessType
from vksync.cmd import Device, set_event

device = Device()
set_event(device, command_buffer=1, event=2, previous_accesses=[AccessType.TRANSFER_WRITE])
print(device.commands[0].name)  # "set_event"
```

## What the package does not do

`vksync` does not talk to a GPU or load a Vulkan driver. Handles such as
command buffers, events, buffers and images are passed through untouched.
To record real commands, subclass `Device` and override its `cmd_*`
methods to forward them to the Vulkan binding you use.
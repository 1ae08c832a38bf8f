import pytest

from vksync.access import AccessType as T
from vksync.access import ImageLayout
from vksync.barriers import (
    BufferBarrier,
    GlobalBarrier,
    ImageBarrier,
    UnsupportedLayoutError,
    get_buffer_memory_barrier,
    get_image_memory_barrier,
    get_memory_barrier,
)
from vksync.vk import AccessFlags as A
from vksync.vk import ImageSubresourceRange
from vksync.vk import PipelineStageFlags as S
from vksync.vk import VkImageLayout as L

GLOBAL_CASES = [
    ([T.COMPUTE_SHADER_WRITE], [T.COMPUTE_SHADER_READ_OTHER],
     S.COMPUTE_SHADER, S.COMPUTE_SHADER, A.SHADER_WRITE, A.SHADER_READ),
    ([T.COMPUTE_SHADER_WRITE], [T.INDEX_BUFFER],
     S.COMPUTE_SHADER, S.VERTEX_INPUT, A.SHADER_WRITE, A.INDEX_READ),
    ([T.COMPUTE_SHADER_WRITE], [T.INDIRECT_BUFFER],
     S.COMPUTE_SHADER, S.DRAW_INDIRECT, A.SHADER_WRITE, A.INDIRECT_COMMAND_READ),
    ([T.NOTHING], [T.TRANSFER_READ],
     S.TOP_OF_PIPE, S.TRANSFER, A(0), A(0)),
    ([T.TRANSFER_WRITE], [T.VERTEX_BUFFER],
     S.TRANSFER, S.VERTEX_INPUT, A.TRANSFER_WRITE, A.VERTEX_ATTRIBUTE_READ),
    ([T.GENERAL], [T.GENERAL],
     S.ALL_COMMANDS, S.ALL_COMMANDS,
     A.MEMORY_READ | A.MEMORY_WRITE, A.MEMORY_READ | A.MEMORY_WRITE),
    ([T.COMPUTE_SHADER_WRITE], [T.INDEX_BUFFER, T.COMPUTE_SHADER_READ_UNIFORM_BUFFER],
     S.COMPUTE_SHADER, S.VERTEX_INPUT | S.COMPUTE_SHADER,
     A.SHADER_WRITE, A.INDEX_READ | A.UNIFORM_READ),
    ([T.COMPUTE_SHADER_WRITE], [T.INDIRECT_BUFFER, T.FRAGMENT_SHADER_READ_UNIFORM_BUFFER],
     S.COMPUTE_SHADER, S.DRAW_INDIRECT | S.FRAGMENT_SHADER,
     A.SHADER_WRITE, A.INDIRECT_COMMAND_READ | A.UNIFORM_READ),
]


@pytest.mark.parametrize("previous, next_, src, dst, src_access, dst_access", GLOBAL_CASES)
def test_global_barrier_cases(previous, next_, src, dst, src_access, dst_access):
    barrier = GlobalBarrier(previous_accesses=previous, next_accesses=next_)
    src_mask, dst_mask, native = get_memory_barrier(barrier)
    assert src_mask == src
    assert dst_mask == dst
    assert native.src_access_mask == src_access
    assert native.dst_access_mask == dst_access


def test_empty_global_barrier_uses_top_and_bottom_of_pipe():
    src_mask, dst_mask, native = get_memory_barrier(GlobalBarrier())
    assert src_mask == S.TOP_OF_PIPE
    assert dst_mask == S.BOTTOM_OF_PIPE
    assert native.src_access_mask == A(0)
    assert native.dst_access_mask == A(0)


def test_global_barrier_stores_accesses_as_tuples():
    barrier = GlobalBarrier(previous_accesses=[T.HOST_WRITE], next_accesses=[T.HOST_READ])
    assert barrier.previous_accesses == (T.HOST_WRITE,)
    assert barrier.next_accesses == (T.HOST_READ,)


IMAGE_CASES = [
    (T.COMPUTE_SHADER_WRITE, T.FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
     S.COMPUTE_SHADER, S.FRAGMENT_SHADER, A.SHADER_WRITE, A.SHADER_READ,
     L.GENERAL, L.SHADER_READ_ONLY_OPTIMAL),
    (T.COLOR_ATTACHMENT_WRITE, T.COMPUTE_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
     S.COLOR_ATTACHMENT_OUTPUT, S.COMPUTE_SHADER, A.COLOR_ATTACHMENT_WRITE, A.SHADER_READ,
     L.COLOR_ATTACHMENT_OPTIMAL, L.SHADER_READ_ONLY_OPTIMAL),
    (T.DEPTH_STENCIL_ATTACHMENT_WRITE, T.COMPUTE_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
     S.EARLY_FRAGMENT_TESTS | S.LATE_FRAGMENT_TESTS, S.COMPUTE_SHADER,
     A.DEPTH_STENCIL_ATTACHMENT_WRITE, A.SHADER_READ,
     L.DEPTH_STENCIL_ATTACHMENT_OPTIMAL, L.SHADER_READ_ONLY_OPTIMAL),
    (T.DEPTH_STENCIL_ATTACHMENT_WRITE, T.FRAGMENT_SHADER_READ_DEPTH_STENCIL_INPUT_ATTACHMENT,
     S.EARLY_FRAGMENT_TESTS | S.LATE_FRAGMENT_TESTS, S.FRAGMENT_SHADER,
     A.DEPTH_STENCIL_ATTACHMENT_WRITE, A.INPUT_ATTACHMENT_READ,
     L.DEPTH_STENCIL_ATTACHMENT_OPTIMAL, L.DEPTH_STENCIL_READ_ONLY_OPTIMAL),
    (T.DEPTH_STENCIL_ATTACHMENT_WRITE, T.FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
     S.EARLY_FRAGMENT_TESTS | S.LATE_FRAGMENT_TESTS, S.FRAGMENT_SHADER,
     A.DEPTH_STENCIL_ATTACHMENT_WRITE, A.SHADER_READ,
     L.DEPTH_STENCIL_ATTACHMENT_OPTIMAL, L.SHADER_READ_ONLY_OPTIMAL),
    (T.COLOR_ATTACHMENT_WRITE, T.FRAGMENT_SHADER_READ_COLOR_INPUT_ATTACHMENT,
     S.COLOR_ATTACHMENT_OUTPUT, S.FRAGMENT_SHADER, A.COLOR_ATTACHMENT_WRITE,
     A.INPUT_ATTACHMENT_READ, L.COLOR_ATTACHMENT_OPTIMAL, L.SHADER_READ_ONLY_OPTIMAL),
    (T.COLOR_ATTACHMENT_WRITE, T.FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
     S.COLOR_ATTACHMENT_OUTPUT, S.FRAGMENT_SHADER, A.COLOR_ATTACHMENT_WRITE, A.SHADER_READ,
     L.COLOR_ATTACHMENT_OPTIMAL, L.SHADER_READ_ONLY_OPTIMAL),
    (T.COLOR_ATTACHMENT_WRITE, T.VERTEX_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
     S.COLOR_ATTACHMENT_OUTPUT, S.VERTEX_SHADER, A.COLOR_ATTACHMENT_WRITE, A.SHADER_READ,
     L.COLOR_ATTACHMENT_OPTIMAL, L.SHADER_READ_ONLY_OPTIMAL),
    (T.FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER, T.COLOR_ATTACHMENT_WRITE,
     S.FRAGMENT_SHADER, S.COLOR_ATTACHMENT_OUTPUT, A(0), A(0),
     L.SHADER_READ_ONLY_OPTIMAL, L.COLOR_ATTACHMENT_OPTIMAL),
    (T.TRANSFER_WRITE, T.FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER,
     S.TRANSFER, S.FRAGMENT_SHADER, A.TRANSFER_WRITE, A.SHADER_READ,
     L.TRANSFER_DST_OPTIMAL, L.SHADER_READ_ONLY_OPTIMAL),
    (T.COLOR_ATTACHMENT_WRITE, T.PRESENT,
     S.COLOR_ATTACHMENT_OUTPUT, S.BOTTOM_OF_PIPE, A.COLOR_ATTACHMENT_WRITE, A(0),
     L.COLOR_ATTACHMENT_OPTIMAL, L.PRESENT_SRC_KHR),
]

RANGE = ImageSubresourceRange(aspect_mask=0, base_mip_level=0, level_count=1,
                              base_array_layer=0, layer_count=1)


@pytest.mark.parametrize(
    "previous, next_, src, dst, src_access, dst_access, old_layout, new_layout", IMAGE_CASES
)
def test_image_barrier_cases(previous, next_, src, dst, src_access, dst_access,
                             old_layout, new_layout):
    barrier = ImageBarrier(
        previous_accesses=[previous],
        next_accesses=[next_],
        previous_layout=ImageLayout.OPTIMAL,
        next_layout=ImageLayout.OPTIMAL,
        discard_contents=False,
        range=RANGE,
    )
    src_mask, dst_mask, native = get_image_memory_barrier(barrier)
    assert src_mask == src
    assert dst_mask == dst
    assert native.src_access_mask == src_access
    assert native.dst_access_mask == dst_access
    assert native.old_layout == old_layout
    assert native.new_layout == new_layout


def test_image_barrier_copies_resource_fields():
    barrier = ImageBarrier(
        previous_accesses=[T.TRANSFER_WRITE],
        next_accesses=[T.TRANSFER_READ],
        src_queue_family_index=1,
        dst_queue_family_index=2,
        image=42,
        range=RANGE,
    )
    _, _, native = get_image_memory_barrier(barrier)
    assert native.src_queue_family_index == 1
    assert native.dst_queue_family_index == 2
    assert native.image == 42
    assert native.subresource_range == RANGE


def test_general_layout_maps_present_to_present_src():
    barrier = ImageBarrier(
        previous_accesses=[T.COLOR_ATTACHMENT_WRITE],
        next_accesses=[T.PRESENT],
        previous_layout=ImageLayout.GENERAL,
        next_layout=ImageLayout.GENERAL,
    )
    _, _, native = get_image_memory_barrier(barrier)
    assert native.old_layout == L.GENERAL
    assert native.new_layout == L.PRESENT_SRC_KHR


def test_discard_contents_gives_undefined_old_layout():
    barrier = ImageBarrier(
        previous_accesses=[T.PRESENT],
        next_accesses=[T.COLOR_ATTACHMENT_WRITE],
        discard_contents=True,
    )
    _, _, native = get_image_memory_barrier(barrier)
    assert native.old_layout == L.UNDEFINED
    assert native.new_layout == L.COLOR_ATTACHMENT_OPTIMAL


def test_discard_contents_skips_previous_layout_check():
    barrier = ImageBarrier(
        previous_accesses=[T.PRESENT],
        next_accesses=[T.COLOR_ATTACHMENT_WRITE],
        previous_layout=ImageLayout.GENERAL_AND_PRESENTATION,
        discard_contents=True,
    )
    _, _, native = get_image_memory_barrier(barrier)
    assert native.old_layout == L.UNDEFINED


@pytest.mark.parametrize("previous_layout, next_layout", [
    (ImageLayout.GENERAL_AND_PRESENTATION, ImageLayout.OPTIMAL),
    (ImageLayout.OPTIMAL, ImageLayout.GENERAL_AND_PRESENTATION),
])
def test_general_and_presentation_is_unsupported(previous_layout, next_layout):
    barrier = ImageBarrier(
        previous_accesses=[T.COLOR_ATTACHMENT_WRITE],
        next_accesses=[T.PRESENT],
        previous_layout=previous_layout,
        next_layout=next_layout,
    )
    with pytest.raises(UnsupportedLayoutError):
        get_image_memory_barrier(barrier)


def test_buffer_barrier_masks_and_fields():
    barrier = BufferBarrier(
        previous_accesses=[T.TRANSFER_WRITE],
        next_accesses=[T.VERTEX_BUFFER],
        src_queue_family_index=3,
        dst_queue_family_index=5,
        buffer=9,
        offset=16,
        size=256,
    )
    src_mask, dst_mask, native = get_buffer_memory_barrier(barrier)
    assert src_mask == S.TRANSFER
    assert dst_mask == S.VERTEX_INPUT
    assert native.src_access_mask == A.TRANSFER_WRITE
    assert native.dst_access_mask == A.VERTEX_ATTRIBUTE_READ
    assert (native.src_queue_family_index, native.dst_queue_family_index) == (3, 5)
    assert (native.buffer, native.offset, native.size) == (9, 16, 256)


def test_buffer_barrier_read_after_read_needs_no_access_masks():
    barrier = BufferBarrier(previous_accesses=[T.INDEX_BUFFER], next_accesses=[T.TRANSFER_READ])
    src_mask, dst_mask, native = get_buffer_memory_barrier(barrier)
    assert src_mask == S.VERTEX_INPUT
    assert dst_mask == S.TRANSFER
    assert native.src_access_mask == A(0)
    assert native.dst_access_mask == A(0)
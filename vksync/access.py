"""Simplified access types and their mapping to Vulkan stages, accesses and layouts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from vksync.vk import AccessFlags, PipelineStageFlags, VkImageLayout


class AccessType(Enum):
    """Every resource usage the library understands."""

    NOTHING = auto()
    COMMAND_BUFFER_READ_NVX = auto()
    INDIRECT_BUFFER = auto()
    INDEX_BUFFER = auto()
    VERTEX_BUFFER = auto()
    VERTEX_SHADER_READ_UNIFORM_BUFFER = auto()
    VERTEX_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = auto()
    VERTEX_SHADER_READ_OTHER = auto()
    TESSELLATION_CONTROL_SHADER_READ_UNIFORM_BUFFER = auto()
    TESSELLATION_CONTROL_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = auto()
    TESSELLATION_CONTROL_SHADER_READ_OTHER = auto()
    TESSELLATION_EVALUATION_SHADER_READ_UNIFORM_BUFFER = auto()
    TESSELLATION_EVALUATION_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = auto()
    TESSELLATION_EVALUATION_SHADER_READ_OTHER = auto()
    GEOMETRY_SHADER_READ_UNIFORM_BUFFER = auto()
    GEOMETRY_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = auto()
    GEOMETRY_SHADER_READ_OTHER = auto()
    FRAGMENT_SHADER_READ_UNIFORM_BUFFER = auto()
    FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = auto()
    FRAGMENT_SHADER_READ_COLOR_INPUT_ATTACHMENT = auto()
    FRAGMENT_SHADER_READ_DEPTH_STENCIL_INPUT_ATTACHMENT = auto()
    FRAGMENT_SHADER_READ_OTHER = auto()
    COLOR_ATTACHMENT_READ = auto()
    DEPTH_STENCIL_ATTACHMENT_READ = auto()
    COMPUTE_SHADER_READ_UNIFORM_BUFFER = auto()
    COMPUTE_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = auto()
    COMPUTE_SHADER_READ_OTHER = auto()
    ANY_SHADER_READ_UNIFORM_BUFFER = auto()
    ANY_SHADER_READ_UNIFORM_BUFFER_OR_VERTEX_BUFFER = auto()
    ANY_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER = auto()
    ANY_SHADER_READ_OTHER = auto()
    TRANSFER_READ = auto()
    HOST_READ = auto()
    PRESENT = auto()
    COMMAND_BUFFER_WRITE_NVX = auto()
    VERTEX_SHADER_WRITE = auto()
    TESSELLATION_CONTROL_SHADER_WRITE = auto()
    TESSELLATION_EVALUATION_SHADER_WRITE = auto()
    GEOMETRY_SHADER_WRITE = auto()
    FRAGMENT_SHADER_WRITE = auto()
    COLOR_ATTACHMENT_WRITE = auto()
    DEPTH_STENCIL_ATTACHMENT_WRITE = auto()
    DEPTH_ATTACHMENT_WRITE_STENCIL_READ_ONLY = auto()
    STENCIL_ATTACHMENT_WRITE_DEPTH_READ_ONLY = auto()
    COMPUTE_SHADER_WRITE = auto()
    ANY_SHADER_WRITE = auto()
    TRANSFER_WRITE = auto()
    HOST_WRITE = auto()
    COLOR_ATTACHMENT_READ_WRITE = auto()
    GENERAL = auto()


class ImageLayout(Enum):
    """Reduced set of image layout choices; ``OPTIMAL`` is usually preferred."""

    OPTIMAL = auto()
    GENERAL = auto()
    GENERAL_AND_PRESENTATION = auto()


@dataclass(frozen=True)
class AccessInfo:
    """Vulkan stages, access bits and optimal layout for one access type."""

    stage_mask: PipelineStageFlags
    access_mask: AccessFlags
    image_layout: VkImageLayout


_S = PipelineStageFlags
_A = AccessFlags
_L = VkImageLayout
_T = AccessType

_DEPTH_TESTS = _S.EARLY_FRAGMENT_TESTS | _S.LATE_FRAGMENT_TESTS
_DEPTH_READ_WRITE = _A.DEPTH_STENCIL_ATTACHMENT_WRITE | _A.DEPTH_STENCIL_ATTACHMENT_READ

_ACCESS_INFO: dict[AccessType, AccessInfo] = {
    access: AccessInfo(stage, mask, layout)
    for access, (stage, mask, layout) in {
        _T.NOTHING: (_S(0), _A(0), _L.UNDEFINED),
        _T.COMMAND_BUFFER_READ_NVX: (_S.COMMAND_PREPROCESS_NV, _A.COMMAND_PREPROCESS_READ_NV, _L.UNDEFINED),
        _T.INDIRECT_BUFFER: (_S.DRAW_INDIRECT, _A.INDIRECT_COMMAND_READ, _L.UNDEFINED),
        _T.INDEX_BUFFER: (_S.VERTEX_INPUT, _A.INDEX_READ, _L.UNDEFINED),
        _T.VERTEX_BUFFER: (_S.VERTEX_INPUT, _A.VERTEX_ATTRIBUTE_READ, _L.UNDEFINED),
        _T.VERTEX_SHADER_READ_UNIFORM_BUFFER: (_S.VERTEX_SHADER, _A.SHADER_READ, _L.UNDEFINED),
        _T.VERTEX_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER: (
            _S.VERTEX_SHADER, _A.SHADER_READ, _L.SHADER_READ_ONLY_OPTIMAL),
        _T.VERTEX_SHADER_READ_OTHER: (_S.VERTEX_SHADER, _A.SHADER_READ, _L.GENERAL),
        _T.TESSELLATION_CONTROL_SHADER_READ_UNIFORM_BUFFER: (
            _S.TESSELLATION_CONTROL_SHADER, _A.UNIFORM_READ, _L.UNDEFINED),
        _T.TESSELLATION_CONTROL_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER: (
            _S.TESSELLATION_CONTROL_SHADER, _A.SHADER_READ, _L.SHADER_READ_ONLY_OPTIMAL),
        _T.TESSELLATION_CONTROL_SHADER_READ_OTHER: (
            _S.TESSELLATION_CONTROL_SHADER, _A.SHADER_READ, _L.GENERAL),
        _T.TESSELLATION_EVALUATION_SHADER_READ_UNIFORM_BUFFER: (
            _S.TESSELLATION_EVALUATION_SHADER, _A.UNIFORM_READ, _L.UNDEFINED),
        _T.TESSELLATION_EVALUATION_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER: (
            _S.TESSELLATION_EVALUATION_SHADER, _A.SHADER_READ, _L.SHADER_READ_ONLY_OPTIMAL),
        _T.TESSELLATION_EVALUATION_SHADER_READ_OTHER: (
            _S.TESSELLATION_EVALUATION_SHADER, _A.SHADER_READ, _L.GENERAL),
        _T.GEOMETRY_SHADER_READ_UNIFORM_BUFFER: (_S.GEOMETRY_SHADER, _A.UNIFORM_READ, _L.UNDEFINED),
        _T.GEOMETRY_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER: (
            _S.GEOMETRY_SHADER, _A.SHADER_READ, _L.SHADER_READ_ONLY_OPTIMAL),
        _T.GEOMETRY_SHADER_READ_OTHER: (_S.GEOMETRY_SHADER, _A.SHADER_READ, _L.GENERAL),
        _T.FRAGMENT_SHADER_READ_UNIFORM_BUFFER: (_S.FRAGMENT_SHADER, _A.UNIFORM_READ, _L.UNDEFINED),
        _T.FRAGMENT_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER: (
            _S.FRAGMENT_SHADER, _A.SHADER_READ, _L.SHADER_READ_ONLY_OPTIMAL),
        _T.FRAGMENT_SHADER_READ_COLOR_INPUT_ATTACHMENT: (
            _S.FRAGMENT_SHADER, _A.INPUT_ATTACHMENT_READ, _L.SHADER_READ_ONLY_OPTIMAL),
        _T.FRAGMENT_SHADER_READ_DEPTH_STENCIL_INPUT_ATTACHMENT: (
            _S.FRAGMENT_SHADER, _A.INPUT_ATTACHMENT_READ, _L.DEPTH_STENCIL_READ_ONLY_OPTIMAL),
        _T.FRAGMENT_SHADER_READ_OTHER: (_S.FRAGMENT_SHADER, _A.SHADER_READ, _L.GENERAL),
        _T.COLOR_ATTACHMENT_READ: (
            _S.COLOR_ATTACHMENT_OUTPUT, _A.COLOR_ATTACHMENT_READ, _L.COLOR_ATTACHMENT_OPTIMAL),
        _T.DEPTH_STENCIL_ATTACHMENT_READ: (
            _DEPTH_TESTS, _A.DEPTH_STENCIL_ATTACHMENT_READ, _L.DEPTH_STENCIL_READ_ONLY_OPTIMAL),
        _T.COMPUTE_SHADER_READ_UNIFORM_BUFFER: (_S.COMPUTE_SHADER, _A.UNIFORM_READ, _L.UNDEFINED),
        _T.COMPUTE_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER: (
            _S.COMPUTE_SHADER, _A.SHADER_READ, _L.SHADER_READ_ONLY_OPTIMAL),
        _T.COMPUTE_SHADER_READ_OTHER: (_S.COMPUTE_SHADER, _A.SHADER_READ, _L.GENERAL),
        _T.ANY_SHADER_READ_UNIFORM_BUFFER: (_S.ALL_COMMANDS, _A.UNIFORM_READ, _L.UNDEFINED),
        _T.ANY_SHADER_READ_UNIFORM_BUFFER_OR_VERTEX_BUFFER: (
            _S.ALL_COMMANDS, _A.UNIFORM_READ | _A.VERTEX_ATTRIBUTE_READ, _L.UNDEFINED),
        _T.ANY_SHADER_READ_SAMPLED_IMAGE_OR_UNIFORM_TEXEL_BUFFER: (
            _S.ALL_COMMANDS, _A.SHADER_READ, _L.SHADER_READ_ONLY_OPTIMAL),
        _T.ANY_SHADER_READ_OTHER: (_S.ALL_COMMANDS, _A.SHADER_READ, _L.GENERAL),
        _T.TRANSFER_READ: (_S.TRANSFER, _A.TRANSFER_READ, _L.TRANSFER_SRC_OPTIMAL),
        _T.HOST_READ: (_S.HOST, _A.HOST_READ, _L.GENERAL),
        _T.PRESENT: (_S(0), _A(0), _L.PRESENT_SRC_KHR),
        _T.COMMAND_BUFFER_WRITE_NVX: (
            _S.COMMAND_PREPROCESS_NV, _A.COMMAND_PREPROCESS_WRITE_NV, _L.UNDEFINED),
        _T.VERTEX_SHADER_WRITE: (_S.VERTEX_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        _T.TESSELLATION_CONTROL_SHADER_WRITE: (
            _S.TESSELLATION_CONTROL_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        _T.TESSELLATION_EVALUATION_SHADER_WRITE: (
            _S.TESSELLATION_EVALUATION_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        _T.GEOMETRY_SHADER_WRITE: (_S.GEOMETRY_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        _T.FRAGMENT_SHADER_WRITE: (_S.FRAGMENT_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        _T.COLOR_ATTACHMENT_WRITE: (
            _S.COLOR_ATTACHMENT_OUTPUT, _A.COLOR_ATTACHMENT_WRITE, _L.COLOR_ATTACHMENT_OPTIMAL),
        _T.DEPTH_STENCIL_ATTACHMENT_WRITE: (
            _DEPTH_TESTS, _A.DEPTH_STENCIL_ATTACHMENT_WRITE, _L.DEPTH_STENCIL_ATTACHMENT_OPTIMAL),
        _T.DEPTH_ATTACHMENT_WRITE_STENCIL_READ_ONLY: (
            _DEPTH_TESTS, _DEPTH_READ_WRITE, _L.DEPTH_ATTACHMENT_STENCIL_READ_ONLY_OPTIMAL),
        _T.STENCIL_ATTACHMENT_WRITE_DEPTH_READ_ONLY: (
            _DEPTH_TESTS, _DEPTH_READ_WRITE, _L.DEPTH_READ_ONLY_STENCIL_ATTACHMENT_OPTIMAL),
        _T.COMPUTE_SHADER_WRITE: (_S.COMPUTE_SHADER, _A.SHADER_WRITE, _L.GENERAL),
        _T.ANY_SHADER_WRITE: (_S.ALL_COMMANDS, _A.SHADER_WRITE, _L.GENERAL),
        _T.TRANSFER_WRITE: (_S.TRANSFER, _A.TRANSFER_WRITE, _L.TRANSFER_DST_OPTIMAL),
        _T.HOST_WRITE: (_S.HOST, _A.HOST_WRITE, _L.GENERAL),
        _T.COLOR_ATTACHMENT_READ_WRITE: (
            _S.COLOR_ATTACHMENT_OUTPUT,
            _A.COLOR_ATTACHMENT_READ | _A.COLOR_ATTACHMENT_WRITE,
            _L.COLOR_ATTACHMENT_OPTIMAL),
        _T.GENERAL: (_S.ALL_COMMANDS, _A.MEMORY_READ | _A.MEMORY_WRITE, _L.GENERAL),
    }.items()
}

_WRITE_ACCESSES = frozenset({
    _T.COMMAND_BUFFER_WRITE_NVX,
    _T.VERTEX_SHADER_WRITE,
    _T.TESSELLATION_CONTROL_SHADER_WRITE,
    _T.TESSELLATION_EVALUATION_SHADER_WRITE,
    _T.GEOMETRY_SHADER_WRITE,
    _T.FRAGMENT_SHADER_WRITE,
    _T.COLOR_ATTACHMENT_WRITE,
    _T.DEPTH_STENCIL_ATTACHMENT_WRITE,
    _T.DEPTH_ATTACHMENT_WRITE_STENCIL_READ_ONLY,
    _T.STENCIL_ATTACHMENT_WRITE_DEPTH_READ_ONLY,
    _T.COMPUTE_SHADER_WRITE,
    _T.ANY_SHADER_WRITE,
    _T.TRANSFER_WRITE,
    _T.HOST_WRITE,
    _T.COLOR_ATTACHMENT_READ_WRITE,
    _T.GENERAL,
})


def get_access_info(access_type: AccessType) -> AccessInfo:
    """Return the stages, access bits and optimal layout for ``access_type``."""
    return _ACCESS_INFO[AccessType(access_type)]


def is_write_access(access_type: AccessType) -> bool:
    """Tell whether ``access_type`` writes to the resource."""
    return AccessType(access_type) in _WRITE_ACCESSES
"""Frame animations stored as a texture atlas, and the maths of stepping through them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Tuple

Size = Tuple[int, int]
Uv = Tuple[Tuple[float, float], Tuple[float, float]]


def _fmt_size(size: Size) -> str:
    return f"[{size[0]}, {size[1]}]"


class AnimationError(ValueError):
    """An animation that cannot be built from the given frames or atlas."""


class AtlasInvalidSizeError(AnimationError):
    """The atlas has a zero dimension."""

    def __init__(self, size: Size) -> None:
        super().__init__(f"Frame size is invalid: {_fmt_size(size)}")
        self.size = size


class FrameInvalidSizeError(AnimationError):
    """The frame size has a zero dimension."""

    def __init__(self, size: Size) -> None:
        super().__init__(f"Frame size is invalid: {_fmt_size(size)}")
        self.size = size


class FramesUnequalSizeError(AnimationError):
    """The frames do not all have the same size."""

    def __init__(self) -> None:
        super().__init__("All animation frames must have the same size")


class FrameBiggerThanAtlasError(AnimationError):
    """A frame does not fit inside the atlas."""

    def __init__(self, frame_size: Size, atlas_size: Size) -> None:
        super().__init__(
            f"Frame size {_fmt_size(frame_size)} extends outside atlas size {_fmt_size(atlas_size)}"
        )
        self.frame_size = frame_size
        self.atlas_size = atlas_size


class AtlasSizeIndivisibleByFrameSizeError(AnimationError):
    """The atlas is not a whole number of frames in each direction."""

    def __init__(self, frame_size: Size, atlas_size: Size) -> None:
        super().__init__(
            f"Atlas size {_fmt_size(atlas_size)} is not perfectly divisible by frame size {_fmt_size(frame_size)}"
        )
        self.frame_size = frame_size
        self.atlas_size = atlas_size


class EmptyAnimationError(AnimationError):
    """An animation with no frames."""

    def __init__(self) -> None:
        super().__init__("Each animation must have at least one frame")


@dataclass(frozen=True)
class Image:
    """A width x height image with its pixels stored row by row."""

    size: Size
    pixels: Tuple[Any, ...]

    def __post_init__(self) -> None:
        width, height = self.size
        if width < 0 or height < 0:
            raise ValueError(f"negative image size: {self.size}")
        pixels = tuple(self.pixels)
        if len(pixels) != width * height:
            raise ValueError(f"image of size {self.size} needs {width * height} pixels, got {len(pixels)}")
        object.__setattr__(self, "size", (width, height))
        object.__setattr__(self, "pixels", pixels)

    def get(self, x: int, y: int) -> Any:
        """The pixel at column ``x`` and row ``y``."""
        width, height = self.size
        if not (0 <= x < width and 0 <= y < height):
            raise IndexError(f"pixel ({x}, {y}) outside image of size {self.size}")
        return self.pixels[y * width + x]


@dataclass(frozen=True)
class AnimationState:
    """An atlas holding ``frame_count`` frames of ``frame_size``, laid out row by row."""

    atlas: Image
    frame_count: int
    frame_size: Size

    @classmethod
    def from_frames(cls, frames: Sequence[Image]) -> "AnimationState":
        """Stack equally sized frames top to bottom into one atlas."""
        frames = list(frames)
        if not frames:
            raise EmptyAnimationError()
        frame_size = frames[0].size
        if any(frame.size != frame_size for frame in frames):
            raise FramesUnequalSizeError()
        atlas_size = (frame_size[0], frame_size[1] * len(frames))
        pixels = tuple(pixel for frame in frames for pixel in frame.pixels)
        return cls.from_atlas(Image(atlas_size, pixels), len(frames), frame_size)

    @classmethod
    def from_atlas(cls, atlas: Image, frame_count: int, frame_size: Size) -> "AnimationState":
        """Use an existing atlas, checking that the frame size tiles it exactly."""
        frame_size = (frame_size[0], frame_size[1])
        if 0 in atlas.size:
            raise AtlasInvalidSizeError(atlas.size)
        if 0 in frame_size:
            raise FrameInvalidSizeError(frame_size)
        if atlas.size[0] < frame_size[0] or atlas.size[1] < frame_size[1]:
            raise FrameBiggerThanAtlasError(frame_size, atlas.size)
        if atlas.size[0] % frame_size[0] != 0 or atlas.size[1] % frame_size[1] != 0:
            raise AtlasSizeIndivisibleByFrameSizeError(frame_size, atlas.size)
        return cls(atlas, frame_count, frame_size)

    def duration_for_fps(self, fps: float) -> float:
        """Seconds one pass through the animation takes at ``fps`` frames per second."""
        return self.frame_count / fps

    def frame_index(self, progress: float) -> int:
        """The frame shown at ``progress`` (0 to 1) through the animation."""
        index = max(0, int(progress * self.frame_count))
        return min(index, self.frame_count - 1)

    def frame_uv(self, frame_idx: int) -> Uv:
        """Texture coordinates (min, max) of a frame, inset by half a texel."""
        atlas_w, atlas_h = self.atlas.size
        frame_w, frame_h = self.frame_size
        frames_in_row = atlas_w // frame_w
        col, row = frame_idx % frames_in_row, frame_idx // frames_in_row
        uv_min = ((frame_w * col + 0.5) / atlas_w, (frame_h * row + 0.5) / atlas_h)
        uv_max = ((frame_w * (col + 1) - 0.5) / atlas_w, (frame_h * (row + 1) - 0.5) / atlas_h)
        return uv_min, uv_max
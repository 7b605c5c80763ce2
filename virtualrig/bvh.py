"""Biovision Hierarchy (BVH) motion capture files: skeleton, channels and poses."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple, Union

from .matrix4 import Matrix4
from .vector3 import Vector3

Point = Tuple[float, float, float]
Frame3 = Tuple[Point, Point, Point]

_SEPARATORS = " :,\t"
_SPLIT = re.compile(r"[ :,\t]+")
_HEAD_AND_REST = re.compile(r"[ :,\t]*([^ :,\t]+)[ :,\t]?(.*)", re.S)
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")

_IDENTITY: Frame3 = ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0))
_ORIGIN: Point = (0.0, 0.0, 0.0)


class BvhError(ValueError):
    """Raised when BVH text is malformed or a skeleton is missing."""


class ChannelType(Enum):
    """Degree of freedom driven by one motion channel."""

    X_ROTATION = "Xrotation"
    Y_ROTATION = "Yrotation"
    Z_ROTATION = "Zrotation"
    X_POSITION = "Xposition"
    Y_POSITION = "Yposition"
    Z_POSITION = "Zposition"

    @property
    def is_rotation(self) -> bool:
        return self in (
            ChannelType.X_ROTATION,
            ChannelType.Y_ROTATION,
            ChannelType.Z_ROTATION,
        )


@dataclass(eq=False)
class Channel:
    """One column of the motion table, bound to a joint."""

    joint: Joint = field(repr=False)
    type: ChannelType
    index: int


@dataclass(eq=False)
class Joint:
    """A node of the skeleton hierarchy and its most recent pose."""

    name: str
    index: int
    parent: Optional[Joint] = field(default=None, repr=False)
    children: List[Joint] = field(default_factory=list, repr=False)
    offset: Point = _ORIGIN
    has_site: bool = False
    site: Point = _ORIGIN
    channels: List[Channel] = field(default_factory=list, repr=False)
    world_position: Point = _ORIGIN
    local_frame: Frame3 = _IDENTITY
    rotation: Frame3 = _IDENTITY


def motion_name_from_path(path: str) -> str:
    """The file's base name without directory and extension."""
    if "\\" in path:
        first = path.rindex("\\") + 1
    elif "/" in path:
        first = path.rindex("/") + 1
    else:
        first = 0
    last = path.rfind(".")
    if last < first:
        last = len(path)
    return path[first:last]


def _tokens(line: str) -> List[str]:
    return [t for t in _SPLIT.split(line) if t]


def _atof(text: str) -> float:
    m = _FLOAT_PREFIX.match(text)
    return float(m.group(1)) if m else 0.0


def _atoi(text: str) -> int:
    m = _INT_PREFIX.match(text)
    return int(m.group(1)) if m else 0


def _column(frame: Frame3, i: int) -> Point:
    return (frame[0][i], frame[1][i], frame[2][i])


def _rotation_between(a: Point, b: Point) -> Frame3:
    """Rotation turning direction ``a`` onto direction ``b``."""
    va, vb = Vector3(*a), Vector3(*b)
    w = va.length() * vb.length()
    if w == 0:
        theta = -1.0
    else:
        theta = math.acos(max(-1.0, min(1.0, va.dot(vb) / w)))
    t = va ^ vb
    n = t.length()
    if n > 0:
        t /= n
    c, s = math.cos(theta), math.sin(theta)
    q = 1.0 - c
    return (
        (q * t.x * t.x + c, q * t.x * t.y - s * t.z, q * t.x * t.z + s * t.y),
        (q * t.x * t.y + s * t.z, q * t.y * t.y + c, q * t.y * t.z - s * t.x),
        (q * t.x * t.z - s * t.y, q * t.y * t.z + s * t.x, q * t.z * t.z + c),
    )


_ROTATIONS = {
    ChannelType.X_ROTATION: Matrix4.x_rotation,
    ChannelType.Y_ROTATION: Matrix4.y_rotation,
    ChannelType.Z_ROTATION: Matrix4.z_rotation,
}


class Bvh:
    """A skeleton hierarchy with its per-frame channel values.

    ``scale`` multiplies offsets and root translations when posing;
    ``translation`` is added to every computed world position.
    """

    def __init__(self) -> None:
        self.file_name = ""
        self.motion_name = ""
        self.joints: List[Joint] = []
        self.channels: List[Channel] = []
        self.joint_index: Dict[str, Joint] = {}
        self.num_frames = 0
        self.interval = 0.0
        self.motion_data: List[float] = []
        self.scale: Point = (1.0, 1.0, 1.0)
        self.translation: Point = _ORIGIN

    @property
    def num_channels(self) -> int:
        return len(self.channels)

    # ----- loading ------------------------------------------------------

    @classmethod
    def load(cls, path: Union[str, Path]) -> Bvh:
        """Read and parse a BVH file."""
        with open(path, encoding="utf-8", errors="replace") as f:
            text = f.read()
        return cls.parse(text, str(path))

    @classmethod
    def parse(cls, text: str, path: str = "") -> Bvh:
        """Parse BVH text; ``path`` names where it came from."""
        bvh = cls()
        bvh.file_name = path
        bvh.motion_name = motion_name_from_path(path)
        lines = iter(text.splitlines())
        bvh._parse_hierarchy(lines)
        bvh._parse_motion(lines)
        return bvh

    def _parse_hierarchy(self, lines) -> None:
        stack: List[Optional[Joint]] = []
        joint: Optional[Joint] = None
        new_joint: Optional[Joint] = None
        is_site = False

        for line in lines:
            tokens = _tokens(line)
            if not tokens:
                continue
            token = tokens[0]
            if token == "{":
                stack.append(joint)
                joint = new_joint
                continue
            if token == "}":
                if not stack:
                    raise BvhError("unbalanced '}' in hierarchy")
                joint = stack.pop()
                is_site = False
                continue
            if token in ("ROOT", "JOINT"):
                m = _HEAD_AND_REST.match(line)
                rest = m.group(2) if m else ""
                if not rest:
                    raise BvhError(f"{token} without a name")
                new_joint = Joint(
                    name=rest.lstrip(" "), index=len(self.joints), parent=joint
                )
                self.joints.append(new_joint)
                if joint is not None:
                    joint.children.append(new_joint)
                self.joint_index[new_joint.name] = new_joint
                continue
            if token == "End":
                new_joint = joint
                is_site = True
                continue
            if token == "OFFSET":
                if joint is None:
                    raise BvhError("OFFSET outside of a joint")
                values = [_atof(t) for t in tokens[1:4]]
                values += [0.0] * (3 - len(values))
                point = (values[0], values[1], values[2])
                if is_site:
                    joint.has_site = True
                    joint.site = point
                else:
                    joint.offset = point
                    joint.world_position = point
                continue
            if token == "CHANNELS":
                if joint is None:
                    raise BvhError("CHANNELS outside of a joint")
                self._parse_channels(joint, tokens[1:])
                continue
            if token == "MOTION":
                return
        raise BvhError("missing MOTION section")

    def _parse_channels(self, joint: Joint, tokens: Sequence[str]) -> None:
        count = _atoi(tokens[0]) if tokens else 0
        if count < 0:
            raise BvhError(f"negative channel count {count}")
        names = tokens[1:1 + count]
        if len(names) < count:
            raise BvhError(f"joint {joint.name!r} lists fewer than {count} channels")
        joint.channels = []
        for name in names:
            try:
                kind = ChannelType(name)
            except ValueError:
                raise BvhError(f"unknown channel type {name!r}") from None
            channel = Channel(joint=joint, type=kind, index=len(self.channels))
            self.channels.append(channel)
            joint.channels.append(channel)

    def _parse_motion(self, lines) -> None:
        tokens = _tokens(next(lines, ""))
        if not tokens or tokens[0] != "Frames":
            raise BvhError("expected 'Frames' line")
        if len(tokens) < 2:
            raise BvhError("missing frame count")
        frames = _atoi(tokens[1])
        if frames < 0:
            raise BvhError(f"negative frame count {frames}")

        head, _, rest = next(lines, "").lstrip(":").partition(":")
        if head != "Frame Time":
            raise BvhError("expected 'Frame Time' line")
        time_tokens = _tokens(rest)
        if not time_tokens:
            raise BvhError("missing frame time")

        count = self.num_channels
        data: List[float] = []
        for frame in range(frames):
            values = _tokens(next(lines, ""))
            if len(values) < count:
                raise BvhError(
                    f"frame {frame} has {len(values)} values, expected {count}"
                )
            data.extend(_atof(t) for t in values[:count])

        self.num_frames = frames
        self.interval = _atof(time_tokens[0])
        self.motion_data = data

    # ----- access -------------------------------------------------------

    def joint(self, key: Union[int, str]) -> Optional[Joint]:
        """A joint by index (IndexError if absent) or by name (None if absent)."""
        if isinstance(key, str):
            return self.joint_index.get(key)
        return self.joints[key]

    def _offset_of(self, frame: int, channel: int) -> int:
        if not 0 <= frame < self.num_frames:
            raise IndexError(f"frame {frame} out of range")
        if not 0 <= channel < self.num_channels:
            raise IndexError(f"channel {channel} out of range")
        return frame * self.num_channels + channel

    def motion(self, frame: int, channel: int) -> float:
        """The value of ``channel`` in ``frame``."""
        return self.motion_data[self._offset_of(frame, channel)]

    def set_motion(self, frame: int, channel: int, value: float) -> None:
        """Replace the value of ``channel`` in ``frame``."""
        self.motion_data[self._offset_of(frame, channel)] = float(value)

    # ----- posing -------------------------------------------------------

    def pose(self, frame_no: int) -> List[Point]:
        """Pose the skeleton at a frame and return every joint's world position.

        Each joint's ``world_position``, ``local_frame`` and ``rotation``
        (from its previous bone direction to the current one) are updated.
        """
        if not self.joints:
            raise BvhError("no skeleton loaded")
        if not 0 <= frame_no < self.num_frames:
            raise IndexError(f"frame {frame_no} out of range")
        count = self.num_channels
        if count < 3:
            raise BvhError("the root needs three translation channels")
        data = self.motion_data[frame_no * count:(frame_no + 1) * count]
        self._pose_joint(self.joints[0], data, Matrix4.identity())
        return [j.world_position for j in self.joints]

    def _scaled(self, p: Sequence[float]) -> Point:
        sx, sy, sz = self.scale
        return (p[0] * sx, p[1] * sy, p[2] * sz)

    def _pose_joint(self, joint: Joint, data: Sequence[float], parent: Matrix4) -> None:
        if joint.parent is None:
            move = self._scaled(data[0:3])
        else:
            move = self._scaled(joint.offset)
        m = parent * Matrix4.translation(move)
        for channel in joint.channels:
            make = _ROTATIONS.get(channel.type)
            if make is not None:
                m = m * make(math.radians(data[channel.index]))

        kids = joint.children
        if not kids:
            self._place_bone(joint, m, _ORIGIN, self._scaled(joint.site))
        elif len(kids) == 1:
            self._place_bone(joint, m, _ORIGIN, self._scaled(kids[0].offset))
        else:
            n = len(kids) + 1
            center = self._scaled(
                [sum(c) / n for c in zip(*(k.offset for k in kids))]
            )
            self._place_bone(joint, m, _ORIGIN, center)
            for kid in kids:
                self._place_bone(joint, m, center, self._scaled(kid.offset))

        for kid in kids:
            self._pose_joint(kid, data, m)

    def _place_bone(self, joint: Joint, m: Matrix4, start: Point, end: Point) -> None:
        direction = Vector3(*(e - s for e, s in zip(end, start)))
        if direction.length() < 0.0001:
            direction = Vector3(0.0, 0.0, 1.0)
        else:
            direction.normalize()
        side = Vector3(0.0, 1.0, 0.0) ^ direction
        if side.length() < 0.0001:
            side = Vector3(1.0, 0.0, 0.0)
        else:
            side.normalize()
        up = direction ^ side

        origin = m.transform(start)
        tx, ty, tz = self.translation
        joint.world_position = (origin[0] + tx, origin[1] + ty, origin[2] + tz)

        columns = [m.transform_direction(tuple(v)) for v in (side, up, direction)]
        previous_z = _column(joint.local_frame, 2)
        joint.local_frame = tuple(  # type: ignore[assignment]
            tuple(col[i] for col in columns) for i in range(3)
        )
        joint.rotation = _rotation_between(previous_z, columns[2])
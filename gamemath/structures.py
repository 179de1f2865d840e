"""Plain data records for transforms, skeletal animation and model data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, TypeVar

from .matrix import Matrix4x4
from .quaternion import Quaternion
from .vector import Vector2, Vector3, Vector4

T = TypeVar("T")

NUM_MAX_INFLUENCE = 4


@dataclass
class Transform2D:
    size: Vector2 = field(default_factory=Vector2)
    rotate: float = 0.0
    position: Vector2 = field(default_factory=Vector2)


@dataclass
class EulerTransform:
    scale: Vector3 = field(default_factory=Vector3)
    rotation: Vector3 = field(default_factory=Vector3)
    translation: Vector3 = field(default_factory=Vector3)


@dataclass
class Transform3D:
    scale: Vector3 = field(default_factory=Vector3)
    rotation: Quaternion = field(default_factory=Quaternion)
    translation: Vector3 = field(default_factory=Vector3)


@dataclass
class KeyFrame(Generic[T]):
    """An animated value at a point in time."""

    value: T
    time: float


@dataclass
class AnimationCurve(Generic[T]):
    keyframes: List[KeyFrame[T]] = field(default_factory=list)


@dataclass
class NodeAnimation:
    scale: AnimationCurve[Vector3] = field(default_factory=AnimationCurve)
    rotate: AnimationCurve[Quaternion] = field(default_factory=AnimationCurve)
    translate: AnimationCurve[Vector3] = field(default_factory=AnimationCurve)


@dataclass
class AnimationData:
    """A whole animation: its length and the curves of each animated node."""

    duration: float = 0.0
    node_animations: Dict[str, NodeAnimation] = field(default_factory=dict)


@dataclass
class Joint:
    transform: Transform3D = field(default_factory=Transform3D)
    local_matrix: Matrix4x4 = field(default_factory=Matrix4x4)
    skeleton_space_matrix: Matrix4x4 = field(default_factory=Matrix4x4)
    name: str = ""
    children: List[int] = field(default_factory=list)
    index: int = 0
    parent: Optional[int] = None


@dataclass
class Skeleton:
    root: int = 0
    joint_map: Dict[str, int] = field(default_factory=dict)
    joints: List[Joint] = field(default_factory=list)


@dataclass
class VertexData:
    position: Vector4 = field(default_factory=Vector4)
    texcoord: Vector2 = field(default_factory=Vector2)
    normal: Vector3 = field(default_factory=Vector3)


@dataclass
class Material:
    color: Vector4 = field(default_factory=Vector4)
    enable_lighting: int = 0
    uv_transform: Matrix4x4 = field(default_factory=Matrix4x4)
    shininess: float = 0.0


@dataclass
class MaterialData:
    directory_path: str = ""
    file_path: str = ""
    texture_index: int = 0


@dataclass
class Node:
    transform: Transform3D = field(default_factory=Transform3D)
    local_matrix: Matrix4x4 = field(default_factory=Matrix4x4)
    name: str = ""
    children: List[Node] = field(default_factory=list)


@dataclass
class VertexWeightData:
    weight: float = 0.0
    vertex_index: int = 0


@dataclass
class JointWeightData:
    inverse_bind_pose_matrix: Matrix4x4 = field(default_factory=Matrix4x4)
    vertex_weights: List[VertexWeightData] = field(default_factory=list)


@dataclass
class ModelData:
    skin_cluster_data: Dict[str, JointWeightData] = field(default_factory=dict)
    vertices: List[VertexData] = field(default_factory=list)
    indices: List[int] = field(default_factory=list)
    material: MaterialData = field(default_factory=MaterialData)
    root_node: Node = field(default_factory=Node)


@dataclass
class VertexInfluence:
    """Up to ``NUM_MAX_INFLUENCE`` joint weights acting on one vertex."""

    weights: List[float] = field(default_factory=lambda: [0.0] * NUM_MAX_INFLUENCE)
    joint_indices: List[int] = field(default_factory=lambda: [0] * NUM_MAX_INFLUENCE)

    def __post_init__(self) -> None:
        self.weights = list(self.weights)
        self.joint_indices = list(self.joint_indices)
        if len(self.weights) != NUM_MAX_INFLUENCE:
            raise ValueError(f"weights must hold exactly {NUM_MAX_INFLUENCE} values")
        if len(self.joint_indices) != NUM_MAX_INFLUENCE:
            raise ValueError(
                f"joint_indices must hold exactly {NUM_MAX_INFLUENCE} values"
            )


@dataclass
class WellForGPU:
    skeleton_space_matrix: Matrix4x4 = field(default_factory=Matrix4x4)
    skeleton_space_inverse_transpose_matrix: Matrix4x4 = field(
        default_factory=Matrix4x4
    )
"""
Frame container: one image plus the boxes detected on it
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from ..image.pixel_format import Image
from .bbox_utils import Box


@dataclass
class Frame:
    """
    Detections for a single image, in detector output order

    The image may be None when only box geometry matters.

    Example:
        >>> frame = Frame()
        >>> frame.add_box(Box(0, 0, 4, 4))
        >>> len(frame)
        1
    """
    image: Optional[Image] = None
    boxes: List[Box] = field(default_factory=list)

    def add_box(self, box: Box) -> None:
        self.boxes.append(box)

    def copy(self) -> "Frame":
        """New frame with its own box list, sharing the image"""
        return Frame(image=self.image, boxes=list(self.boxes))

    def __len__(self) -> int:
        return len(self.boxes)

    def __iter__(self) -> Iterator[Box]:
        return iter(self.boxes)

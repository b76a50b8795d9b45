"""
Resource Quantities
Exact CPU (milli-units) and memory (bytes) pairs used by the capacity aggregators
"""

import math
from dataclasses import dataclass, asdict
from decimal import Decimal
from typing import Dict, Optional, Union

from kubernetes.utils import parse_quantity

Quantity = Union[str, int, float, Decimal, None]


def _to_decimal(quantity: Quantity) -> Decimal:
    # Floats go through their shortest repr so 0.1 stays 0.1
    if isinstance(quantity, float):
        quantity = str(quantity)
    return parse_quantity(quantity)


def cpu_to_millis(quantity: Quantity) -> int:
    """Convert a CPU quantity ('2', '500m', 0.25) to milli-units, rounding up"""
    if quantity is None or quantity == "":
        return 0
    return int(math.ceil(_to_decimal(quantity) * 1000))


def memory_to_bytes(quantity: Quantity) -> int:
    """Convert a memory quantity ('4Gi', '512M', 1024) to bytes, rounding up"""
    if quantity is None or quantity == "":
        return 0
    return int(math.ceil(_to_decimal(quantity)))


@dataclass(frozen=True, order=True)
class ResourceItem:
    """
    A CPU/memory pair captured at the same instant.

    Instances are immutable: accumulators replace the whole item rather than
    updating one dimension. Ordering compares (cpu, memory) as a tuple.
    """
    cpu: int = 0  # milli-units
    memory: int = 0  # bytes

    @classmethod
    def empty(cls) -> "ResourceItem":
        return cls(0, 0)

    @classmethod
    def from_quantities(cls, cpu: Quantity, memory: Quantity) -> "ResourceItem":
        """Build an item from Kubernetes quantity values"""
        return cls(cpu=cpu_to_millis(cpu), memory=memory_to_bytes(memory))

    @classmethod
    def from_resource_list(cls, resources: Optional[Dict[str, Quantity]]) -> "ResourceItem":
        """Build an item from a resource map such as container requests or node allocatable"""
        if not resources:
            return cls.empty()
        return cls.from_quantities(resources.get("cpu"), resources.get("memory"))

    def __add__(self, other: "ResourceItem") -> "ResourceItem":
        if not isinstance(other, ResourceItem):
            return NotImplemented
        return ResourceItem(self.cpu + other.cpu, self.memory + other.memory)

    def __sub__(self, other: "ResourceItem") -> "ResourceItem":
        if not isinstance(other, ResourceItem):
            return NotImplemented
        return ResourceItem(self.cpu - other.cpu, self.memory - other.memory)

    def max(self, other: "ResourceItem") -> "ResourceItem":
        """Per-dimension maximum"""
        return ResourceItem(max(self.cpu, other.cpu), max(self.memory, other.memory))

    def is_zero(self) -> bool:
        return self.cpu == 0 and self.memory == 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)

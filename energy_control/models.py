from __future__ import annotations
import itertools
import logging
from dataclasses import dataclass
from typing import Iterator, List, NamedTuple, Optional

logger = logging.getLogger(__name__)

DEFAULT_IMAGE = "plug"


@dataclass(frozen=True)
class Appliance:
	name: str
	image: str = DEFAULT_IMAGE  # opaque icon reference, only used for display
	power_w: int = 0  # watts
	hours_per_day: float = 0

	def daily_kwh(self) -> float:
		return self.power_w * self.hours_per_day / 1000.0

	def __repr__(self) -> str:
		return f"<Appliance {self.name} {self.power_w}W {self.hours_per_day}h>"


class RegistryEntry(NamedTuple):
	handle: int
	appliance: Appliance


class ApplianceRegistry:
	"""
	Ordered in-memory collection of appliances.

	Each entry gets a handle when it is added. Removal goes through the handle,
	so two equal appliances can coexist and only the selected one is removed.
	"""

	def __init__(self) -> None:
		self._entries: List[RegistryEntry] = []
		self._handles = itertools.count(1)

	def add(self, appliance: Appliance) -> int:
		handle = next(self._handles)
		self._entries.append(RegistryEntry(handle, appliance))
		logger.debug("added %r as #%d", appliance, handle)
		return handle

	def remove(self, handle: int) -> bool:
		for i, entry in enumerate(self._entries):
			if entry.handle == handle:
				del self._entries[i]
				logger.debug("removed #%d %r", handle, entry.appliance)
				return True
		return False

	def get(self, handle: int) -> Optional[Appliance]:
		for entry in self._entries:
			if entry.handle == handle:
				return entry.appliance
		return None

	def list(self) -> List[Appliance]:
		return [entry.appliance for entry in self._entries]

	def entries(self) -> List[RegistryEntry]:
		return list(self._entries)

	def __len__(self) -> int:
		return len(self._entries)

	def __iter__(self) -> Iterator[Appliance]:
		return iter(self.list())

	def __contains__(self, handle: object) -> bool:
		return any(entry.handle == handle for entry in self._entries)

	def __repr__(self) -> str:
		return f"<ApplianceRegistry {len(self)} entries>"

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict


class PersistentVolumeEntry(BaseModel):
    """One line of the ``persistent-volumes`` input."""
    model_config = ConfigDict(extra="ignore")

    name: str
    claimName: str
    readOnly: bool = False


class VolumeMountConfig(BaseModel):
    """One line of the ``volume-mounts`` input, forwarded as given."""
    model_config = ConfigDict(extra="allow")

    name: str
    mountPath: str
    readOnly: Optional[bool] = None
    subPath: Optional[str] = None

    def to_dict(self):
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class VolumeSource:
    read_only: bool
    volume_type: str
    claim_name: str


@dataclass(frozen=True)
class VolumeConfig:
    name: str
    volume: VolumeSource

    @classmethod
    def from_entry(cls, entry: PersistentVolumeEntry, volume_type: str):
        return cls(
            name=entry.name,
            volume=VolumeSource(read_only=entry.readOnly, volume_type=volume_type, claim_name=entry.claimName),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "volume": {
                "readOnly": self.volume.read_only,
                "volumeType": self.volume.volume_type,
                "claimName": self.volume.claim_name,
            }
        }

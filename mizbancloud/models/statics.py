"""
Catalog models: datacenters, operating systems, cache times, sliders
"""

from typing import List, Literal, Optional

from mizbancloud.models.common import MizbanModel


StorageType = Literal["SSD", "HDD", "NVMe"]


class Datacenter(MizbanModel):
    id: int
    name: str
    location: str
    country: str
    status: Literal["active", "maintenance", "disabled"]
    available_storage_types: List[StorageType] = []
    allowed_actions: List[str] = []
    features: List[str] = []


class OperatingSystem(MizbanModel):
    id: int
    name: str
    version: str
    family: Literal["linux", "windows", "bsd"]
    min_ram: int
    min_storage: int
    logo: Optional[str] = None


class CacheTime(MizbanModel):
    """Predefined cache TTL option (value in seconds)"""
    
    label: str
    value: int


class Slider(MizbanModel):
    id: int
    title: str
    description: Optional[str] = None
    image: str
    link: Optional[str] = None
    order: int

from enum import Enum

from pydantic import BaseModel, Field, model_validator


class VehicleType(str, Enum):
    SEDAN = "sedan"
    HATCHBACK = "hatchback"
    SUV = "suv"
    TRUCK = "truck"


# Attribute each vehicle type carries on top of the shared fields
VARIANT_FIELDS = {
    VehicleType.SEDAN: "number_of_doors",
    VehicleType.HATCHBACK: "number_of_doors",
    VehicleType.SUV: "number_of_seats",
    VehicleType.TRUCK: "load_capacity",
}


class Vehicle(BaseModel):
    """A vehicle in the inventory, tagged by ``vehicle_type``.

    Every type shares the same record; the type decides which of the
    variant attributes (doors, seats, load capacity) must be set.
    """

    id: int
    vehicle_type: VehicleType
    manufacturer: str
    model: str
    year: int
    starting_bid: float = Field(ge=0)
    number_of_doors: int | None = Field(default=None, gt=0)
    number_of_seats: int | None = Field(default=None, gt=0)
    load_capacity: float | None = Field(default=None, gt=0)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_variant_fields(self):
        required = VARIANT_FIELDS[self.vehicle_type]
        for name in set(VARIANT_FIELDS.values()):
            value = getattr(self, name)
            if name == required and value is None:
                raise ValueError(f"{self.vehicle_type.value} requires {name}")
            if name != required and value is not None:
                raise ValueError(f"{self.vehicle_type.value} does not take {name}")
        return self

    @classmethod
    def sedan(cls, **fields) -> "Vehicle":
        return cls(vehicle_type=VehicleType.SEDAN, **fields)

    @classmethod
    def hatchback(cls, **fields) -> "Vehicle":
        return cls(vehicle_type=VehicleType.HATCHBACK, **fields)

    @classmethod
    def suv(cls, **fields) -> "Vehicle":
        return cls(vehicle_type=VehicleType.SUV, **fields)

    @classmethod
    def truck(cls, **fields) -> "Vehicle":
        return cls(vehicle_type=VehicleType.TRUCK, **fields)

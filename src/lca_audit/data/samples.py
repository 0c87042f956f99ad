"""Built-in sample projects for demos, the CLI, and tests.

Each sample is a complete :class:`LCAInput` describing a realistic
metallurgical process.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from lca_audit.data.models import (
    Emission,
    EnergyInput,
    EnergyType,
    LCAInput,
    RawMaterial,
    Transport,
    TransportMode,
    WasteOutput,
    WaterUsage,
)


class SampleProject(BaseModel):
    """A named, described example input."""

    name: str = Field(description="Short identifier for the sample")
    description: str = Field(description="Human-readable description of the process")
    lca_input: LCAInput = Field(description="The example input record")


# ---------------------------------------------------------------------------
# Sample definitions
# ---------------------------------------------------------------------------

COPPER_CONCENTRATE = SampleProject(
    name="copper_concentrate",
    description=(
        "Hydrometallurgical copper processing: ore leaching with sulfuric "
        "acid, grid power with a diesel fleet, partial water recycling."
    ),
    lca_input=LCAInput(
        project_name="Copper Concentrate Processing",
        process_type="Hydrometallurgical Processing",
        raw_materials=[
            RawMaterial(name="Copper Ore", quantity=10000, unit="kg", source="Open-pit Mine"),
            RawMaterial(name="Sulfuric Acid", quantity=500, unit="kg", source="Chemical Supplier"),
            RawMaterial(name="Process Water", quantity=5000, unit="L", source="On-site Reservoir"),
        ],
        energy=[
            EnergyInput(type=EnergyType.electricity, amount=15000, unit="kWh"),
            EnergyInput(type=EnergyType.diesel, amount=800, unit="L"),
            EnergyInput(type=EnergyType.renewable, amount=3000, unit="kWh"),
        ],
        emissions=[
            Emission(type="CO2", amount=8500, unit="kg"),
            Emission(type="SO2", amount=120, unit="kg"),
            Emission(type="NOx", amount=45, unit="kg"),
        ],
        water=WaterUsage(consumption=5000, discharge=2500, recycled=2000),
        transport=[
            Transport(mode=TransportMode.truck, distance=150, load_weight=10000),
            Transport(mode=TransportMode.rail, distance=500, load_weight=10000),
        ],
    ),
)

IRON_ORE = SampleProject(
    name="iron_ore",
    description=(
        "Pyrometallurgical iron ore processing with coke and limestone, "
        "mixed truck and rail logistics."
    ),
    lca_input=LCAInput(
        project_name="Iron Ore Processing Project",
        process_type="Pyrometallurgical Processing",
        raw_materials=[
            RawMaterial(name="Iron Ore", quantity=50000, unit="kg", source="Underground Mine"),
            RawMaterial(name="Coke", quantity=5000, unit="kg", source="Coal Plant"),
            RawMaterial(name="Limestone", quantity=3000, unit="kg", source="Quarry"),
        ],
        energy=[
            EnergyInput(type=EnergyType.electricity, amount=8000, unit="kWh"),
            EnergyInput(type=EnergyType.coal, amount=2000, unit="kWh"),
            EnergyInput(type=EnergyType.electricity, amount=500, unit="kWh"),
        ],
        emissions=[
            Emission(type="CO2", amount=4000, unit="kg"),
            Emission(type="CO2", amount=1500, unit="kg"),
            Emission(type="CO2", amount=250, unit="kg"),
        ],
        water=WaterUsage(consumption=1000, discharge=300, recycled=200),
        transport=[
            Transport(mode=TransportMode.truck, distance=200, load_weight=50000),
            Transport(mode=TransportMode.rail, distance=300, load_weight=5000),
            Transport(mode=TransportMode.truck, distance=50, load_weight=3000),
        ],
    ),
)

SECONDARY_ALUMINIUM = SampleProject(
    name="secondary_aluminium",
    description=(
        "Scrap-based aluminium remelting with a large renewable share, "
        "high water recycling, and tracked dross recovery."
    ),
    lca_input=LCAInput(
        project_name="Secondary Aluminium Remelt",
        process_type="Scrap Remelting",
        raw_materials=[
            RawMaterial(name="Aluminium Scrap", quantity=20, unit="tonnes", source="Scrap Dealer"),
        ],
        energy=[
            EnergyInput(type=EnergyType.electricity, amount=12000, unit="kWh"),
            EnergyInput(type=EnergyType.natural_gas, amount=1500, unit="m³"),
            EnergyInput(type=EnergyType.renewable, amount=6000, unit="kWh"),
        ],
        emissions=[
            Emission(type="CO2", amount=2500, unit="kg"),
            Emission(type="HFC-134a", amount=0.5, unit="kg"),
        ],
        water=WaterUsage(consumption=400, discharge=100, recycled=260),
        transport=[
            Transport(mode=TransportMode.truck, distance=120, load_weight=20000),
        ],
        waste=[
            WasteOutput(type="Dross", amount=800, unit="kg", recycled=600),
            WasteOutput(type="Filter Dust", amount=150, unit="kg", recycled=30),
        ],
    ),
)

SAMPLES: dict[str, SampleProject] = {
    COPPER_CONCENTRATE.name: COPPER_CONCENTRATE,
    IRON_ORE.name: IRON_ORE,
    SECONDARY_ALUMINIUM.name: SECONDARY_ALUMINIUM,
}


def get_sample(name: str) -> LCAInput:
    """Return a fresh copy of the named sample input.

    Raises:
        KeyError: If *name* is not a known sample.
    """
    if name not in SAMPLES:
        available = ", ".join(sorted(SAMPLES))
        raise KeyError(f"Unknown sample '{name}'. Available: {available}")
    return SAMPLES[name].lca_input.model_copy(deep=True)

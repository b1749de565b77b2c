from __future__ import annotations

from dataclasses import dataclass

from part_dedupe.schema import Category


@dataclass(frozen=True)
class CategoryProfile:
    """Vocabulary used to synthesize realistic parts for one category."""

    noun: str
    spec_values: dict[str, tuple[str, ...]]
    manufacturers: tuple[str, ...]
    standards: tuple[str, ...]
    risk_notes: tuple[str, ...]


_GENERIC_RISKS = (
    "Open purchase orders reference both material numbers",
    "Stock on hand would be double counted after merge",
    "BOM usage differs between plants",
)


CATEGORY_PROFILES: dict[Category, CategoryProfile] = {
    Category.BEARING: CategoryProfile(
        noun="Deep Groove Ball Bearing",
        spec_values={"bore": ("20 mm", "25 mm", "30 mm"), "outerDiameter": ("47 mm", "52 mm", "62 mm"), "seal": ("2RS", "ZZ")},
        manufacturers=("SKF", "FAG", "NSK"),
        standards=("ISO 15:2017", "DIN 625-1"),
        risk_notes=("Seal type mismatch causes premature failure in wet areas", *_GENERIC_RISKS),
    ),
    Category.SCREW: CategoryProfile(
        noun="Hex Socket Cap Screw",
        spec_values={"thread": ("M6", "M8", "M10"), "length": ("20 mm", "25 mm", "30 mm"), "material": ("8.8 steel", "A2-70")},
        manufacturers=("Würth", "Bossard", "Fabory"),
        standards=("ISO 4762", "DIN 912"),
        risk_notes=("Property class mismatch weakens bolted joints", *_GENERIC_RISKS),
    ),
    Category.VALVE: CategoryProfile(
        noun="Ball Valve",
        spec_values={"size": ("DN25", "DN50"), "pressure": ("PN16", "PN40"), "body": ("CF8M", "WCB")},
        manufacturers=("Emerson", "Flowserve", "KSB"),
        standards=("ISO 17292", "API 608"),
        risk_notes=("Pressure rating mismatch is a safety hazard", *_GENERIC_RISKS),
    ),
    Category.GASKET: CategoryProfile(
        noun="Spiral Wound Gasket",
        spec_values={"size": ("DN50", "DN80"), "rating": ("PN40", "Class 300"), "filler": ("graphite", "PTFE")},
        manufacturers=("Garlock", "Klinger", "Flexitallic"),
        standards=("ISO 7483", "ASME B16.20"),
        risk_notes=("Filler incompatible with process media", *_GENERIC_RISKS),
    ),
    Category.SEAL: CategoryProfile(
        noun="Radial Shaft Seal",
        spec_values={"shaft": ("30 mm", "35 mm"), "housing": ("47 mm", "52 mm"), "elastomer": ("NBR", "FKM")},
        manufacturers=("Freudenberg", "Trelleborg", "SKF"),
        standards=("ISO 6194", "DIN 3760"),
        risk_notes=("Elastomer mismatch degrades under temperature", *_GENERIC_RISKS),
    ),
    Category.PIPE: CategoryProfile(
        noun="Seamless Steel Pipe",
        spec_values={"nominalSize": ("DN50", "DN100"), "schedule": ("SCH40", "SCH80"), "grade": ("P235GH", "A106 B")},
        manufacturers=("Tenaris", "Vallourec", "Salzgitter"),
        standards=("ISO 3183", "EN 10216-2"),
        risk_notes=("Wall thickness mismatch affects pressure containment", *_GENERIC_RISKS),
    ),
    Category.FLANGE: CategoryProfile(
        noun="Weld Neck Flange",
        spec_values={"size": ("DN50", "DN80"), "rating": ("PN16", "Class 150"), "facing": ("RF", "FF")},
        manufacturers=("Ulma", "Officine Nicoli", "Metalfar"),
        standards=("ISO 7005-1", "EN 1092-1"),
        risk_notes=("Facing type mismatch prevents gasket seating", *_GENERIC_RISKS),
    ),
    Category.MOTOR: CategoryProfile(
        noun="Three-Phase Induction Motor",
        spec_values={"power": ("4 kW", "5.5 kW"), "speed": ("1450 rpm", "2900 rpm"), "frame": ("IEC 112M", "IEC 132S")},
        manufacturers=("Siemens", "ABB", "WEG"),
        standards=("IEC 60034-30-1", "NEMA MG 1"),
        risk_notes=("Efficiency class change affects energy compliance", *_GENERIC_RISKS),
    ),
    Category.PUMP: CategoryProfile(
        noun="Centrifugal Pump",
        spec_values={"flow": ("25 m3/h", "50 m3/h"), "head": ("32 m", "50 m"), "seal": ("mechanical", "packing")},
        manufacturers=("Grundfos", "KSB", "Sulzer"),
        standards=("ISO 2858", "API 610"),
        risk_notes=("Impeller trim differs between records", *_GENERIC_RISKS),
    ),
    Category.SENSOR: CategoryProfile(
        noun="Pressure Transmitter",
        spec_values={"range": ("0-10 bar", "0-16 bar"), "output": ("4-20 mA", "HART"), "process": ("G1/2", "1/2 NPT")},
        manufacturers=("Endress+Hauser", "Yokogawa", "WIKA"),
        standards=("ISO 6789", "IEC 61298"),
        risk_notes=("Calibration range mismatch hides out-of-spec readings", *_GENERIC_RISKS),
    ),
    Category.CABLE: CategoryProfile(
        noun="Power Cable",
        spec_values={"cores": ("3G1.5", "5G2.5"), "voltage": ("0.6/1 kV", "450/750 V"), "sheath": ("PVC", "LSZH")},
        manufacturers=("Nexans", "Prysmian", "Lapp"),
        standards=("ISO 6722", "IEC 60502-1"),
        risk_notes=("Sheath material mismatch breaks fire-safety rules", *_GENERIC_RISKS),
    ),
    Category.FASTENER: CategoryProfile(
        noun="Hex Nut",
        spec_values={"thread": ("M8", "M10", "M12"), "class": ("8", "10"), "finish": ("zinc", "plain")},
        manufacturers=("Würth", "Bossard", "Böllhoff"),
        standards=("ISO 4032", "DIN 934"),
        risk_notes=("Finish mismatch causes galvanic corrosion", *_GENERIC_RISKS),
    ),
    Category.OTHER: CategoryProfile(
        noun="Maintenance Kit",
        spec_values={"contents": ("basic", "extended"), "packSize": ("1", "10")},
        manufacturers=("Generic Supply", "MRO Direct"),
        standards=("ISO 9001", "Internal spec"),
        risk_notes=_GENERIC_RISKS,
    ),
}

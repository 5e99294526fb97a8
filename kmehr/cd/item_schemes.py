"""KMEHR CD-ITEM schemes.

Closed catalog of the identifier schemes allowed in the `S` attribute of a
KMEHR `cd` element of type CD-ITEMschemes, each with the version that goes
into the `SV` attribute.

Usage:
- writing: `scheme.wire_name` -> S, `scheme.version` -> SV
- reading: `CDItemScheme.from_wire_name(s_attribute)`
"""

from enum import StrEnum


class UnknownScheme(ValueError):
    """Raised when a wire name does not belong to the CD-ITEM catalog."""

    def __init__(self, wire_name: str):
        super().__init__(f"Unknown CD-ITEM scheme: {wire_name!r}")
        self.wire_name = wire_name


class CDItemScheme(StrEnum):
    """CD-ITEM scheme: member value is the wire name, `version` the SV tag."""

    CD_ITEM = "CD-ITEM", "1.11"
    CD_ITEM_MAA = "CD-ITEM-MAA", "1.0"
    CD_ITEM_CARENET = "CD-ITEM-CARENET", "1.0"
    CD_LAB = "CD-LAB", "1.1"
    CD_TECHNICAL = "CD-TECHNICAL", "1.0"
    CD_CONTACT_PERSON = "CD-CONTACT-PERSON", "1.2"
    ICD = "ICD", "1.0"
    ICPC = "ICPC", "1.0"
    LOCAL = "LOCAL", "1.0"
    CD_VACCINE = "CD-VACCINE", "2.0"
    CD_ECG = "CD-ECG", "1.0"
    CD_ECARE_CLINICAL = "CD-ECARE-CLINICAL", "1.0"
    CD_ECARE_LAB = "CD-ECARE-LAB", "1.0"
    CD_ECARE_HAQ = "CD-ECARE-HAQ", "1.0"
    CD_ITEM_EBIRTH = "CD-ITEM-EBIRTH", "1.1"
    CD_PARAMETER = "CD-PARAMETER", "1.1"
    CD_ITEM_BVT = "CD-ITEM-BVT", "1.0"
    CD_BVT_AVAILABLEMATERIALS = "CD-BVT-AVAILABLEMATERIALS", "1.0"
    CD_BVT_CONSERVATIONDELAY = "CD-BVT-CONSERVATIONDELAY", "1.0"
    CD_BVT_CONSERVATIONMODE = "CD-BVT-CONSERVATIONMODE", "1.0"
    CD_BVT_SAMPLETYPE = "CD-BVT-SAMPLETYPE", "1.0"
    # "DIFFERENTATION" is the schema spelling.
    CD_BCR_DIFFERENTATIONDEGREE = "CD-BCR-DIFFERENTATIONDEGREE", "1.0"
    CD_BVT_LATERALITY = "CD-BVT-LATERALITY", "1.0"
    CD_BVT_PATIENTOPPOSITION = "CD-BVT-PATIENTOPPOSITION", "1.0"
    CD_BVT_STATUS = "CD-BVT-STATUS", "1.0"
    CD_ITEM_REG = "CD-ITEM-REG", "1.6"
    CD_ITEM_MYCARENET = "CD-ITEM-MYCARENET", "1.3"
    CD_DEFIB_DIAGNOSIS = "CD-DEFIB-DIAGNOSIS", "1.0"
    CD_ACTS_NURSING = "CD-ACTS-NURSING", "1.0"
    CD_QERMID_INTERVENTIONTYPE = "CD-QERMID-INTERVENTIONTYPE", "1.0"

    def __new__(cls, wire_name: str, version: str):
        member = str.__new__(cls, wire_name)
        member._value_ = wire_name
        member._version = version
        return member

    @property
    def wire_name(self) -> str:
        return self._value_

    @property
    def version(self) -> str:
        return self._version

    @classmethod
    def from_wire_name(cls, wire_name: str) -> "CDItemScheme":
        """Resolve an `S` attribute value, exact match only (no case folding, no trimming)."""
        scheme = _BY_WIRE_NAME.get(wire_name) if isinstance(wire_name, str) else None
        if scheme is None:
            raise UnknownScheme(wire_name)
        return scheme


_BY_WIRE_NAME: dict[str, CDItemScheme] = {s.wire_name: s for s in CDItemScheme}


def wire_name(scheme: CDItemScheme) -> str:
    return scheme.wire_name


def version(scheme: CDItemScheme) -> str:
    return scheme.version


def from_wire_name(name: str) -> CDItemScheme:
    return CDItemScheme.from_wire_name(name)


def all_schemes() -> tuple[CDItemScheme, ...]:
    """All schemes in declaration order."""
    return tuple(CDItemScheme)

"""Root configuration schema.

A configuration file describes one cabinet: its identity, the materials it
may reference, the material assignment and the structural parameters.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from cabinet_parts.application.config.schemas.base import (
    SUPPORTED_VERSIONS,
    CabinetMaterialsConfig,
    MaterialConfig,
)
from cabinet_parts.application.config.schemas.cabinet_schema import CabinetParamsConfig


class CabinetPartsConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        cabinet_id: Identifier stamped on every generated part
        furniture_id: Furniture the cabinet belongs to
        materials: Materials the cabinet may reference (at least one)
        cabinet_materials: Body, front and back material assignment
        params: Structural cabinet parameters

    Example:
        >>> config = CabinetPartsConfiguration(
        ...     schema_version="1.0",
        ...     cabinet_id="cab-1",
        ...     furniture_id="kitchen",
        ...     materials=[MaterialConfig(id="board", thickness=18)],
        ...     cabinet_materials=CabinetMaterialsConfig(
        ...         body_material_id="board", front_material_id="board"
        ...     ),
        ...     params=CabinetParamsConfig(type="kitchen", width=600, height=720, depth=560),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    cabinet_id: str = Field(default="cabinet", min_length=1)
    furniture_id: str = Field(default="furniture", min_length=1)
    materials: list[MaterialConfig] = Field(..., min_length=1)
    cabinet_materials: CabinetMaterialsConfig
    params: CabinetParamsConfig

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that the schema version is supported.

        Newer minor versions of a supported major version are accepted for
        forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_unique_material_ids(self) -> "CabinetPartsConfiguration":
        """Ensure no two materials share an id."""
        seen: set[str] = set()
        for material in self.materials:
            if material.id in seen:
                raise ValueError(f"Duplicate material id '{material.id}'")
            seen.add(material.id)
        return self

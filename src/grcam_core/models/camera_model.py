"""
Camera Model Registry

Known Ricoh GR models and the EXIF strings that identify them.
"""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, List, Mapping, Optional


class CameraModel(Enum):
    """Supported Ricoh GR camera models"""
    # GR DIGITAL series
    GR_DIGITAL = "GR DIGITAL"            # 2005
    GR_DIGITAL_II = "GR DIGITAL II"      # 2007
    GR_DIGITAL_III = "GR DIGITAL III"    # 2009
    GR_DIGITAL_IV = "GR DIGITAL IV"      # 2011

    # GR series (2013~)
    GR = "GR"
    GR_II = "GR II"
    GR_III = "GR III"
    GR_IIIX = "GR IIIx"
    GR_III_HDF = "GR III HDF"            # Highlight Diffusion Filter
    GR_IIIX_HDF = "GR IIIx HDF"

    # GR IV series (2025~)
    GR_IV = "GR IV"
    GR_IV_HDF = "GR IV HDF"
    GR_IV_MONOCHROME = "GR IV Monochrome"

    # Make is Ricoh and Model mentions GR, but the string is not registered
    UNKNOWN = "Unknown GR"

    @property
    def display_name(self) -> str:
        """Human-readable model name"""
        return self.value

    @property
    def has_filter_option(self) -> bool:
        """Whether this model ships with the Highlight Diffusion Filter"""
        return self in _FILTER_MODELS

    @property
    def is_monochrome(self) -> bool:
        """Whether this model has a dedicated monochrome sensor"""
        return self is CameraModel.GR_IV_MONOCHROME

    @classmethod
    def known(cls) -> List['CameraModel']:
        """All concrete models, excluding UNKNOWN"""
        return [model for model in cls if model is not cls.UNKNOWN]


_FILTER_MODELS: FrozenSet[CameraModel] = frozenset({
    CameraModel.GR_III_HDF,
    CameraModel.GR_IIIX_HDF,
    CameraModel.GR_IV_HDF,
})


# Case-sensitive, as written by the camera firmware
MODEL_MAPPING: Mapping[str, CameraModel] = MappingProxyType({
    # GR DIGITAL series
    'RICOH GR DIGITAL': CameraModel.GR_DIGITAL,
    'GR DIGITAL': CameraModel.GR_DIGITAL,
    'RICOH GR DIGITAL II': CameraModel.GR_DIGITAL_II,
    'GR DIGITAL II': CameraModel.GR_DIGITAL_II,
    'RICOH GR DIGITAL III': CameraModel.GR_DIGITAL_III,
    'GR DIGITAL III': CameraModel.GR_DIGITAL_III,
    'RICOH GR DIGITAL IV': CameraModel.GR_DIGITAL_IV,
    'Ricoh GR Digital IV': CameraModel.GR_DIGITAL_IV,
    'GR DIGITAL IV': CameraModel.GR_DIGITAL_IV,

    # GR series
    'RICOH GR': CameraModel.GR,
    'GR': CameraModel.GR,
    'RICOH GR II': CameraModel.GR_II,
    'GR II': CameraModel.GR_II,
    'RICOH GR III': CameraModel.GR_III,
    'GR III': CameraModel.GR_III,
    'RICOH GR IIIx': CameraModel.GR_IIIX,
    'GR IIIx': CameraModel.GR_IIIX,
    'RICOH GR III HDF': CameraModel.GR_III_HDF,
    'GR III HDF': CameraModel.GR_III_HDF,
    'RICOH GR IIIx HDF': CameraModel.GR_IIIX_HDF,
    'GR IIIx HDF': CameraModel.GR_IIIX_HDF,

    # GR IV series
    'RICOH GR IV': CameraModel.GR_IV,
    'GR IV': CameraModel.GR_IV,
    'RICOH GR IV HDF': CameraModel.GR_IV_HDF,
    'GR IV HDF': CameraModel.GR_IV_HDF,
    'RICOH GR IV Monochrome': CameraModel.GR_IV_MONOCHROME,
    'GR IV Monochrome': CameraModel.GR_IV_MONOCHROME,
})

# Known EXIF Make values for Ricoh cameras
MAKE_VALUES: FrozenSet[str] = frozenset({
    'RICOH',
    'Ricoh',
    'RICOH IMAGING COMPANY, LTD.',
})

BRAND_TOKEN = "GR"


def lookup_model(model_string: str) -> Optional[CameraModel]:
    """Exact, case-sensitive lookup of an EXIF Model string"""
    return MODEL_MAPPING.get(model_string)


def is_known_make(make_string: str) -> bool:
    """Check if an EXIF Make string belongs to Ricoh"""
    return make_string in MAKE_VALUES

"""Public API for culvert-sizer."""

from .california import CALIFORNIA_METHOD_TABLE, Q100, Sized, lookup_table
from .catalog import (
    PROFESSIONAL_ENGINEERING_THRESHOLD_MM,
    STANDARD_CATALOG,
    StandardSizeCatalog,
    next_size_above,
    round_up_to_standard,
)
from .classes_references import InvalidInput
from .climate import ClimateAdjustment, apply_climate, resolve_climate_factor
from .config import field_card_from_mapping, load_field_card_from_json
from .field_card import FieldCard
from .hydraulics import (
    HydraulicArea,
    RationalMethodSizing,
    assess_culvert_sizing,
    compute_hydraulic_area,
    describe_culvert_size,
    flow_capacity,
    pipe_area,
    size_from_rational_method,
    size_from_watershed,
)
from .models import ClimateScenario, StreamMeasurement, TransportParameters
from .results import SizingResult, results_dataframe
from .sizing import size_culvert
from .storage import FieldCardStore
from .store_path import read_store_path_file, resolve_store_path, save_store_path
from .transport import TransportAdjustment, apply_transport, transport_index
from .type_helpers import ClimateScenarioTag, DebrisRating, ProfessionalDesignRequired, SizingAssessment
from .writer import ReportWriter

__all__: list[str] = [
    "CALIFORNIA_METHOD_TABLE",
    "PROFESSIONAL_ENGINEERING_THRESHOLD_MM",
    "Q100",
    "STANDARD_CATALOG",
    "ClimateAdjustment",
    "ClimateScenario",
    "ClimateScenarioTag",
    "DebrisRating",
    "FieldCard",
    "FieldCardStore",
    "HydraulicArea",
    "RationalMethodSizing",
    "InvalidInput",
    "ProfessionalDesignRequired",
    "ReportWriter",
    "Sized",
    "SizingAssessment",
    "SizingResult",
    "StandardSizeCatalog",
    "StreamMeasurement",
    "TransportAdjustment",
    "TransportParameters",
    "apply_climate",
    "apply_transport",
    "assess_culvert_sizing",
    "compute_hydraulic_area",
    "describe_culvert_size",
    "field_card_from_mapping",
    "flow_capacity",
    "load_field_card_from_json",
    "lookup_table",
    "next_size_above",
    "pipe_area",
    "read_store_path_file",
    "resolve_climate_factor",
    "resolve_store_path",
    "results_dataframe",
    "round_up_to_standard",
    "save_store_path",
    "size_culvert",
    "size_from_rational_method",
    "size_from_watershed",
    "transport_index",
]

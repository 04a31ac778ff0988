"""Translation bundle schema.

A bundle is a JSON object with exactly three required sections, each a flat
mapping of leaf key to string. Every key listed here is mandatory; unknown
extra keys are tolerated and ignored by validation.
"""

import copy
from typing import Any, Dict, List, NamedTuple, Optional

from infrastructure.i18n.exceptions import ValidationError

TEMPLATE_PLACEHOLDER = "[Translation needed]"

SECTION_KEYS: Dict[str, tuple] = {
    "html5Qrcode": (
        "codeParseError",
        "errorGettingUserMedia",
        "onlyDeviceSupportedError",
        "cameraStreamingNotSupported",
        "unableToQuerySupportedDevices",
        "insecureContextCameraQueryError",
        "scannerPaused",
    ),
    "html5QrcodeScanner": (
        "scanningStatus",
        "idleStatus",
        "errorStatus",
        "permissionStatus",
        "noCameraFoundErrorStatus",
        "lastMatch",
        "codeScannerTitle",
        "cameraPermissionTitle",
        "cameraPermissionRequesting",
        "noCameraFound",
        "scanButtonStopScanningText",
        "scanButtonStartScanningText",
        "torchOnButton",
        "torchOffButton",
        "torchOnFailedMessage",
        "torchOffFailedMessage",
        "scanButtonScanningStarting",
        "textIfCameraScanSelected",
        "textIfFileScanSelected",
        "selectCamera",
        "fileSelectionChooseImage",
        "fileSelectionChooseAnother",
        "fileSelectionNoImageSelected",
        "anonymousCameraPrefix",
        "dragAndDropMessage",
        "dragAndDropMessageOnlyImages",
        "zoom",
        "loadingImage",
        "cameraScanAltText",
        "fileScanAltText",
    ),
    "libraryInfo": (
        "poweredBy",
        "reportIssues",
    ),
}

REQUIRED_SECTIONS = tuple(SECTION_KEYS)


class SchemaProblem(NamedTuple):
    """One schema violation found in a bundle."""

    section: Optional[str]
    key: Optional[str]
    reason: str


def collect_schema_errors(data: Any) -> List[SchemaProblem]:
    """Return every schema violation in ``data``, in schema order.

    An invalid section is reported once and its keys are not inspected.
    """
    if not isinstance(data, dict):
        return [SchemaProblem(None, None, "Translation bundle must be an object")]

    problems = []
    for section_name, required_keys in SECTION_KEYS.items():
        section = data.get(section_name)
        if section_name not in data or not isinstance(section, dict):
            problems.append(
                SchemaProblem(
                    section_name, None, f"Missing or invalid required section '{section_name}'"
                )
            )
            continue

        for key in required_keys:
            if key not in section:
                problems.append(
                    SchemaProblem(
                        section_name,
                        key,
                        f"Missing required key '{key}' in section '{section_name}'",
                    )
                )
            elif not isinstance(section[key], str):
                problems.append(
                    SchemaProblem(
                        section_name,
                        key,
                        f"Value for '{key}' in section '{section_name}' must be a string, "
                        f"got {type(section[key]).__name__}",
                    )
                )
    return problems


def validate_bundle_data(locale: str, data: Any) -> None:
    """Validate raw bundle data against the schema.

    Args:
        locale: Locale the data is being loaded for, used in the error message.
        data: Decoded JSON value.

    Raises:
        ValidationError: Naming the first offending section/key. All problems
            are attached as ``problems``.
    """
    problems = collect_schema_errors(data)
    if not problems:
        return

    first = problems[0]
    raise ValidationError(
        f"Invalid translation bundle for locale '{locale}': {first.reason}",
        locale=locale,
        section=first.section,
        key=first.key,
        problems=problems,
    )


def build_template(placeholder: str = TEMPLATE_PLACEHOLDER) -> Dict[str, Dict[str, str]]:
    """Build bundle data with every required key set to ``placeholder``.

    Useful as the starting point for authoring a new locale file.
    """
    return {
        section: {key: placeholder for key in keys}
        for section, keys in SECTION_KEYS.items()
    }


def copy_bundle_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Deep copy validated bundle data so callers cannot mutate stored bundles."""
    return copy.deepcopy(data)

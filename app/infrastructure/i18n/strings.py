"""Display strings used by the scanner and its widgets.

Each accessor resolves through the process-wide translator, so the returned
text follows whatever locale is active at call time.
"""

from typing import Any

from infrastructure.services.providers import get_translator


def _t(key: str, **params: Any) -> str:
    return get_translator().translate(key, params or None)


class Html5QrcodeStrings:
    """Strings used by the camera/decoder core."""

    @staticmethod
    def code_parse_error(error: Any) -> str:
        return _t("html5Qrcode.codeParseError", error=error)

    @staticmethod
    def error_getting_user_media(error: Any) -> str:
        return _t("html5Qrcode.errorGettingUserMedia", error=error)

    @staticmethod
    def only_device_supported_error() -> str:
        return _t("html5Qrcode.onlyDeviceSupportedError")

    @staticmethod
    def camera_streaming_not_supported() -> str:
        return _t("html5Qrcode.cameraStreamingNotSupported")

    @staticmethod
    def unable_to_query_supported_devices() -> str:
        return _t("html5Qrcode.unableToQuerySupportedDevices")

    @staticmethod
    def insecure_context_camera_query_error() -> str:
        return _t("html5Qrcode.insecureContextCameraQueryError")

    @staticmethod
    def scanner_paused() -> str:
        return _t("html5Qrcode.scannerPaused")


class Html5QrcodeScannerStrings:
    """Strings used by the scanner widget."""

    @staticmethod
    def scanning_status() -> str:
        return _t("html5QrcodeScanner.scanningStatus")

    @staticmethod
    def idle_status() -> str:
        return _t("html5QrcodeScanner.idleStatus")

    @staticmethod
    def error_status() -> str:
        return _t("html5QrcodeScanner.errorStatus")

    @staticmethod
    def permission_status() -> str:
        return _t("html5QrcodeScanner.permissionStatus")

    @staticmethod
    def no_camera_found_error_status() -> str:
        return _t("html5QrcodeScanner.noCameraFoundErrorStatus")

    @staticmethod
    def last_match(decoded_text: str) -> str:
        return _t("html5QrcodeScanner.lastMatch", decodedText=decoded_text)

    @staticmethod
    def code_scanner_title() -> str:
        return _t("html5QrcodeScanner.codeScannerTitle")

    @staticmethod
    def camera_permission_title() -> str:
        return _t("html5QrcodeScanner.cameraPermissionTitle")

    @staticmethod
    def camera_permission_requesting() -> str:
        return _t("html5QrcodeScanner.cameraPermissionRequesting")

    @staticmethod
    def no_camera_found() -> str:
        return _t("html5QrcodeScanner.noCameraFound")

    @staticmethod
    def scan_button_stop_scanning_text() -> str:
        return _t("html5QrcodeScanner.scanButtonStopScanningText")

    @staticmethod
    def scan_button_start_scanning_text() -> str:
        return _t("html5QrcodeScanner.scanButtonStartScanningText")

    @staticmethod
    def torch_on_button() -> str:
        return _t("html5QrcodeScanner.torchOnButton")

    @staticmethod
    def torch_off_button() -> str:
        return _t("html5QrcodeScanner.torchOffButton")

    @staticmethod
    def torch_on_failed_message() -> str:
        return _t("html5QrcodeScanner.torchOnFailedMessage")

    @staticmethod
    def torch_off_failed_message() -> str:
        return _t("html5QrcodeScanner.torchOffFailedMessage")

    @staticmethod
    def scan_button_scanning_starting() -> str:
        return _t("html5QrcodeScanner.scanButtonScanningStarting")

    @staticmethod
    def text_if_camera_scan_selected() -> str:
        return _t("html5QrcodeScanner.textIfCameraScanSelected")

    @staticmethod
    def text_if_file_scan_selected() -> str:
        return _t("html5QrcodeScanner.textIfFileScanSelected")

    @staticmethod
    def select_camera() -> str:
        return _t("html5QrcodeScanner.selectCamera")

    @staticmethod
    def file_selection_choose_image() -> str:
        return _t("html5QrcodeScanner.fileSelectionChooseImage")

    @staticmethod
    def file_selection_choose_another() -> str:
        return _t("html5QrcodeScanner.fileSelectionChooseAnother")

    @staticmethod
    def file_selection_no_image_selected() -> str:
        return _t("html5QrcodeScanner.fileSelectionNoImageSelected")

    @staticmethod
    def anonymous_camera_prefix() -> str:
        return _t("html5QrcodeScanner.anonymousCameraPrefix")

    @staticmethod
    def drag_and_drop_message() -> str:
        return _t("html5QrcodeScanner.dragAndDropMessage")

    @staticmethod
    def drag_and_drop_message_only_images() -> str:
        return _t("html5QrcodeScanner.dragAndDropMessageOnlyImages")

    @staticmethod
    def zoom() -> str:
        return _t("html5QrcodeScanner.zoom")

    @staticmethod
    def loading_image() -> str:
        return _t("html5QrcodeScanner.loadingImage")

    @staticmethod
    def camera_scan_alt_text() -> str:
        return _t("html5QrcodeScanner.cameraScanAltText")

    @staticmethod
    def file_scan_alt_text() -> str:
        return _t("html5QrcodeScanner.fileScanAltText")


class LibraryInfoStrings:
    """Strings used in the library info footer."""

    @staticmethod
    def powered_by() -> str:
        return _t("libraryInfo.poweredBy")

    @staticmethod
    def report_issues() -> str:
        return _t("libraryInfo.reportIssues")

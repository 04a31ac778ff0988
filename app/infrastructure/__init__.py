"""Infrastructure modules for the scanner i18n service.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Locale resolution, bundle loading and string interpolation
- services: Application-scoped providers (get_settings, get_translator)
"""

"""Infrastructure packages shared by feature modules.

Centralized infrastructure components:
- configuration: Settings management (Settings, ExportFeatureSettings, StorageSettings)
- logging: Structured logging (configure_logging, get_module_logger, bind_operation_context)
- operations: Operation results, error classification and cancellation
- services: Application-scoped providers (get_settings, get_export_scope_service)

Subpackages are imported explicitly by callers; nothing is loaded here so
that feature modules can depend on logging and operations without pulling
in the provider wiring.
"""

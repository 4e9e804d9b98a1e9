"""Internal modules for Edge CLI SDK.

These modules back the public API in `edgecli_sdk` and may change without
notice.

Modules:
    dispatch - Request building, dispatch and error normalization
    http - Default httpx authenticator and client configuration
    jsonutil - JSON parsing and pretty-printing helpers
"""

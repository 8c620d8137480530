"""
Test-runner integration and baseline maintenance.

- pytest_plugin: publishes the running test's identity
- approve_received: promotes received files to approved
"""

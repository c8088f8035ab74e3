"""
Deployment Errors
Single error type raised for every deployment failure
"""


class DeploymentError(Exception):
    """Raised when a contract cannot be resolved, deployed or confirmed"""


def describe_error(error: Exception) -> str:
    """Error detail for logs, never empty"""
    if isinstance(error, DeploymentError):
        return str(error) or type(error).__name__

    detail = str(error)
    if not detail:
        return type(error).__name__
    return f"{type(error).__name__}: {detail}"

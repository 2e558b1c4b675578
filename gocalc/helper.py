from gocalc.errors import CalcError, ParseError


def error_message(expression: str, location: int, message: str) -> str:
    location = min(max(location, 0), len(expression))
    return f"{expression}\n{' ' * location}^ {message}"


def describe_error(expression: str, error: CalcError) -> str:
    message = str(error)
    if isinstance(error, ParseError):
        message = f"{message}: {error.detail}"
    if error.location is None:
        return message
    return error_message(expression, error.location, message)

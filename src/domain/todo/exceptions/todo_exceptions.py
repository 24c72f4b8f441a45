class TodoError(Exception):
    pass


class QRCodeGenerationError(TodoError):
    pass

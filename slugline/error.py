# exception classes


class SluglineError(Exception):
    def __init__(self, msg):
        Exception.__init__(self, msg)
        self.msg = msg

    def __str__(self):
        return str(self.msg)


class ConfigError(SluglineError):
    def __init__(self, msg):
        SluglineError.__init__(self, msg)


class MiscError(SluglineError):
    def __init__(self, msg):
        SluglineError.__init__(self, msg)


# input that could not be turned into a screenplay: malformed XML or JSON,
# or a document missing required structure.
class DecodeError(SluglineError):
    def __init__(self, msg):
        SluglineError.__init__(self, msg)

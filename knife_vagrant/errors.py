class KnifeVagrantError(Exception):
    pass


class VagrantNotFoundError(KnifeVagrantError):
    def __init__(self):
        super().__init__("Vagrant executable not found")


class VagrantfileNotFoundError(KnifeVagrantError):
    def __init__(self, filepath, msg=""):
        super().__init__(msg or f"{filepath} doesn't exist")
        self.filepath = filepath


class UnsupportedVagrantActionError(KnifeVagrantError):
    def __init__(self, args):
        super().__init__("Unsupported vagrant action: %s" % " ".join(args))
        self.action = list(args)


class ChefConfigurationNotFoundError(KnifeVagrantError):
    def __init__(self, filepath):
        super().__init__(f"Chef configuration file {filepath} doesn't exist")
        self.filepath = filepath


class ChefKeyError(KnifeVagrantError):
    def __init__(self, filepath, msg=""):
        super().__init__(msg or f"Unable to read the private key {filepath}")
        self.filepath = filepath


class ChefServerError(KnifeVagrantError):
    def __init__(self, method, path, status_code, msg=""):
        super().__init__(
            "%s %s failed with status %s: %s" % (method, path, status_code, msg)
        )
        self.method = method
        self.path = path
        self.status_code = status_code

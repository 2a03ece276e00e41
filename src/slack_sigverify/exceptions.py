class SlackSigVerifyError(RuntimeError):
    pass


class ConfigurationError(SlackSigVerifyError):
    pass

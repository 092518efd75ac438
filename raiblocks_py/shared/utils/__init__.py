__all__ = ["Notifier", "log_notifier", "silent_notifier"]

from raiblocks_py.shared.utils.notifier import Notifier, log_notifier, silent_notifier

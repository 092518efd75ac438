__all__ = ["MockNode", "RAI", "MRAI"]

from test.utils.mock_node import MockNode, RAI, MRAI

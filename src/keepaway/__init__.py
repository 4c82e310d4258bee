"""
keepaway — turn-based item-passing simulation.

Agents hold FIFO queues of integer worry values, inspect them in strict roster order,
transform and reduce each value, and route it by a divisibility test. The business
metric is the product of the two largest inspection counts.
"""

__version__ = "0.1.0"

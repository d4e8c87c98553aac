"""Constants describing the layout of a generated ID.

Changing any of these changes the meaning of every ID issued before.
"""

# 2017-12-31T16:00:00Z (2018-01-01 00:00 UTC+8) in milliseconds
EPOCH = 1514736000000

WORKER_ID_BITS = 5
DATACENTER_ID_BITS = 5
SEQUENCE_BITS = 12
TIMESTAMP_BITS = 41

MAX_WORKER_ID = (1 << WORKER_ID_BITS) - 1
MAX_DATACENTER_ID = (1 << DATACENTER_ID_BITS) - 1
SEQUENCE_MASK = (1 << SEQUENCE_BITS) - 1
TIMESTAMP_MASK = (1 << TIMESTAMP_BITS) - 1

WORKER_ID_SHIFT = SEQUENCE_BITS
DATACENTER_ID_SHIFT = SEQUENCE_BITS + WORKER_ID_BITS
TIMESTAMP_LEFT_SHIFT = DATACENTER_ID_SHIFT + DATACENTER_ID_BITS

MAX_ID = (1 << 63) - 1

NEVER_GENERATED = -1

# SPDX-License-Identifier: MIT


class ItemType:
    TASK = "task"
    BLOCK = "block"

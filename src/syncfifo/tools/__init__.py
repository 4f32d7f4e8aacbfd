# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/syncfifo/tools/__init__.py

"""Command-line tools.

Modules:
- fifo_sim: ``syncfifo-sim`` scenario runner
- fifo_sim_examples/: Example YAML scenarios
"""

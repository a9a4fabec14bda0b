# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/tools/__init__.py

"""Command-line tools for running AXIL benches."""

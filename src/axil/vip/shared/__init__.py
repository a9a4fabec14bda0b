# SPDX-FileCopyrightText: 2025 Hugh Walsh
#
# SPDX-License-Identifier: MIT

# This file: src/axil/vip/shared/__init__.py

"""Infrastructure shared by AXIL benches."""

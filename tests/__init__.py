# SPDX-FileCopyrightText: 2025 FanaticPythoner
# SPDX-License-Identifier: Apache-2.0

"""
Test suite for storegen.

This package contains tests for all components of storegen:
- Directive parsing and field normalization
- Model assembly and patch dependency resolution
- The schema registry end to end
- The SQL query builder, page options and template functions
"""

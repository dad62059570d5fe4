#!/usr/bin/env python3

"""Infrastructure layer: external collaborators and technical concerns.

Submodules:
- binary_image: PE/ELF container reading
- clang_frontend: C declaration tree via libclang
- debug_info_writer: JSON debug-info output
- config, logging: application plumbing
"""

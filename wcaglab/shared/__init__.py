#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/shared/__init__.py

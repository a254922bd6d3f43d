#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/core/__init__.py

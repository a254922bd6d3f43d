#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: wcaglab/constants/__init__.py

# -*- coding: utf-8 -*-

version = "1.0.0"

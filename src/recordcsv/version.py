# src/recordcsv/version.py
VERSION = "0.3.0"

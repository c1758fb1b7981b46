"""Command line interface for my-ui"""

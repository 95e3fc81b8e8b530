"""Command line interface for brewprune"""

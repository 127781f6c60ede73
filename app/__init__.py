"""Inactivity notification and reminder service.

Kept as a regular package so ``app`` never resolves to an unrelated
namespace package from site-packages.
"""

"""
helm-take-ownership - hands existing cluster namespaces over to Helm

Builds a release for the namespaces and their registry secrets and writes it
straight into Tiller's release storage, so Helm treats them as already installed.
"""

from .release import build_release
from .storage import Storage

__all__ = ['build_release', 'Storage']

"""Graphical preview for ipatalk.

This subpackage contains a small PyQt6 window that shows the talk
notation of whatever IPA is typed into it.  The conversion used by the
window lives in :mod:`ipatalk.gui.preview`, which does not import Qt
and can be used (and tested) on a headless machine.

Note that the window depends on the ``PyQt6`` package, installed with
the ``gui`` extra (``pip install ipatalk[gui]``).
"""

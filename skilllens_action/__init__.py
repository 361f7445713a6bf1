"""
SkillLens Action

GitHub Action that turns pull request review feedback into learning
recommendations and posts them as a single PR comment.
"""

__version__ = "1.0.0"

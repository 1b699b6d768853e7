"""Falling-block puzzle engine with a pygame frontend and a Gymnasium environment."""

from loguru import logger

# Silent unless a host application opts in with logger.enable("falling_blocks")
logger.disable("falling_blocks")

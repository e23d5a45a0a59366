"""Small learning tools: ASCII letter art, image-to-ASCII art, a palindrome finder, quizzes and a chat server."""

__version__ = "0.1.0"
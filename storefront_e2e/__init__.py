"""End-to-end UI suite for the storefront demo application.

The package holds the pieces the Gherkin steps call into: the Code/Decode
upload workbook patcher, fixture loading, Playwright page objects, the suite
config loader and logging.
"""

__version__ = "0.1.0"

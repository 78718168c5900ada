"""
CLI entry point for the radiolinks-build command.
"""
from radiolinks.runner import main

# Re-export main for the console_scripts entry point
__all__ = ['main']

if __name__ == '__main__':
    main()

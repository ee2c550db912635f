#!/usr/bin/env python3
"""Convenience entry-point — run with: python convert.py [template.docx] [output.pdf] [data.json]"""

from office_template_pdf.cli import main

if __name__ == "__main__":
    main()

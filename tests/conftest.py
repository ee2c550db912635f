import json

import pytest

from office_template_pdf import converter
from office_template_pdf.config import API_KEY_ENV


class FakeSdk:
    """Stand-in for the Apryse names imported by ``office_template_pdf.converter``."""

    def __init__(self):
        self.calls = []
        self.fail_on = set()
        self.filled_json = None
        sdk = self

        class SDFDoc:
            e_linearized = 1
            e_remove_unused = 2
            e_compatibility = 4

        class OfficeToPDFOptions:
            pass

        class PdfDoc:
            def Save(self, path, flags):
                sdk._call("Save", path, flags)
                with open(path, "wb") as f:
                    f.write(b"%PDF-1.7\n%fake\n")

            def Close(self):
                sdk._call("Close")

        class TemplateDocument:
            def FillTemplateJson(self, json_text):
                sdk._call("FillTemplateJson")
                sdk.filled_json = json.loads(json_text)
                return PdfDoc()

        class Convert:
            @staticmethod
            def CreateOfficeTemplate(path, options):
                sdk._call("CreateOfficeTemplate", path)
                assert isinstance(options, OfficeToPDFOptions)
                return TemplateDocument()

        class PDFNet:
            @staticmethod
            def Initialize(key):
                sdk._call("Initialize", key)

            @staticmethod
            def Terminate():
                sdk._call("Terminate")

        self.SDFDoc = SDFDoc
        self.OfficeToPDFOptions = OfficeToPDFOptions
        self.Convert = Convert
        self.PDFNet = PDFNet

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if name in self.fail_on:
            raise RuntimeError(f"{name} failed")

    def names(self):
        return [c[0] for c in self.calls]

    def count(self, name):
        return self.names().count(name)


@pytest.fixture
def fake_sdk(monkeypatch):
    sdk = FakeSdk()
    monkeypatch.setattr(converter, "PDFNet", sdk.PDFNet)
    monkeypatch.setattr(converter, "Convert", sdk.Convert)
    monkeypatch.setattr(converter, "OfficeToPDFOptions", sdk.OfficeToPDFOptions)
    monkeypatch.setattr(converter, "SDFDoc", sdk.SDFDoc)
    return sdk


@pytest.fixture
def no_api_key(monkeypatch):
    # setenv first so teardown also removes anything load_dotenv puts back
    monkeypatch.setenv(API_KEY_ENV, "placeholder")
    monkeypatch.delenv(API_KEY_ENV)


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv(API_KEY_ENV, "demo:test-key")
    return "demo:test-key"


@pytest.fixture
def template(tmp_path):
    path = tmp_path / "template.docx"
    path.write_bytes(b"PK\x03\x04 not really a docx")
    return path


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "data.json"
    path.write_text(
        json.dumps({"name": "Zoë", "items": [{"sku": "A1", "qty": 2}], "paid": True}),
        encoding="utf-8",
    )
    return path

"""
Tests for MCP tools.

Tests the MCP tool implementations for stylesheet storage and
compilation.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_stylesheet.stylesheets import StylesheetLoader
from chuk_mcp_stylesheet.tools import register_compilation_tools, register_stylesheet_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def loader(library_path: Path, temp_dir: Path) -> StylesheetLoader:
    """Loader over the built-in library with a temporary project directory."""
    return StylesheetLoader(library_path=library_path, project_path=temp_dir / "stylesheets")


@pytest.fixture
def compilation_tools(loader: StylesheetLoader, temp_dir: Path) -> dict:
    """Registered compilation tools."""
    return register_compilation_tools(MockMCPServer("test"), loader, temp_dir / "output")


@pytest.fixture
def stylesheet_tools(loader: StylesheetLoader) -> dict:
    """Registered stylesheet tools."""
    return register_stylesheet_tools(MockMCPServer("test"), loader)


class TestRegistration:
    """Tests for tool registration."""

    def test_tools_registered_with_server(self, loader: StylesheetLoader, temp_dir: Path):
        """Every returned tool is also registered on the server."""
        mcp = MockMCPServer("test")
        tools = register_compilation_tools(mcp, loader, temp_dir)
        tools.update(register_stylesheet_tools(mcp, loader))

        assert set(mcp.tools) == set(tools)
        assert "stylesheet_compile" in tools
        assert "stylesheet_list" in tools


class TestCompilationTools:
    """Tests for compilation tools."""

    @pytest.mark.asyncio
    async def test_compile_by_name(self, compilation_tools: dict):
        """Compile a library stylesheet."""
        result = await compilation_tools["stylesheet_compile"](name="buttons")
        data = json.loads(result)

        assert data["status"] == "success"
        assert data["rule_tree"]["button-primary"]["background"] == "#1e6fd9"
        assert data["classes"]["button"]["plain"] == "button-plain"

    @pytest.mark.asyncio
    async def test_compile_inline(self, compilation_tools: dict):
        """Compile inline YAML source."""
        result = await compilation_tools["stylesheet_compile"](
            source='box: {color: red, ":hover": {color: blue}}'
        )
        data = json.loads(result)

        assert data["status"] == "success"
        assert data["rule_tree"] == {"box": {"color": "red", "&:hover": {"color": "blue"}}}
        assert data["classes"] == {}

    @pytest.mark.asyncio
    async def test_compile_inline_json(self, compilation_tools: dict):
        """JSON source works as YAML."""
        result = await compilation_tools["stylesheet_compile"](
            source='{"box": {"@media print": {"display": "none"}}}'
        )
        data = json.loads(result)
        assert data["rule_tree"]["box"]["@media print"] == {"display": "none"}

    @pytest.mark.asyncio
    async def test_compile_error(self, compilation_tools: dict):
        """Compile errors are returned with their code."""
        result = await compilation_tools["stylesheet_compile"](
            source='box: {":hover": {":focus": {color: green}}}'
        )
        data = json.loads(result)

        assert data["status"] == "error"
        assert data["code"] == "pseudo-nested"

    @pytest.mark.asyncio
    async def test_compile_not_found(self, compilation_tools: dict):
        """Unknown stylesheet names are errors."""
        data = json.loads(await compilation_tools["stylesheet_compile"](name="nonexistent"))
        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_compile_needs_input(self, compilation_tools: dict):
        """Either a name or a source is required."""
        data = json.loads(await compilation_tools["stylesheet_compile"]())
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_validate(self, compilation_tools: dict):
        """Validation returns warnings without failing."""
        result = await compilation_tools["stylesheet_validate"](
            source="box: {hover: {color: red}}"
        )
        data = json.loads(result)

        assert data["status"] == "success"
        assert data["valid"] is True
        assert data["warnings"][0]["code"] == "MAPPING_VALUE"

    @pytest.mark.asyncio
    async def test_validate_invalid(self, compilation_tools: dict):
        """Compile failures show up as validation errors."""
        data = json.loads(await compilation_tools["stylesheet_validate"](source="box: {}"))

        assert data["status"] == "success"
        assert data["valid"] is False
        assert data["errors"][0]["code"] == "EMPTY_BLOCK"

    @pytest.mark.asyncio
    async def test_render_css(self, compilation_tools: dict, temp_dir: Path):
        """Rendering writes a CSS file with engine class names."""
        data = json.loads(await compilation_tools["stylesheet_render_css"](name="buttons"))

        assert data["status"] == "success"
        path = Path(data["path"])
        assert path == temp_dir / "output" / "buttons.css"
        assert path.read_text() == data["css"]
        assert ".button-0-0 {" in data["css"]
        assert "border-radius: 4px;" in data["css"]
        assert data["classes"]["icon"] == "icon-0-3"
        assert data["classes"]["button"]["primary"] == "button-0-0 button-primary-0-1"
        assert data["classes"]["button"]["plain"] == "button-0-0"

    @pytest.mark.asyncio
    async def test_render_css_output_name(self, compilation_tools: dict, temp_dir: Path):
        """Inline source renders to the given file name."""
        data = json.loads(
            await compilation_tools["stylesheet_render_css"](
                source="box: {color: red}", output_name="custom"
            )
        )
        assert data["path"] == str(temp_dir / "output" / "custom.css")
        assert data["css"] == ".box-0-0 {\n  color: red;\n}\n"

    @pytest.mark.asyncio
    async def test_resolve_variant(self, compilation_tools: dict):
        """Known variants resolve to their class name."""
        data = json.loads(
            await compilation_tools["stylesheet_resolve_variant"](
                class_name="button", variant="danger", name="buttons"
            )
        )

        assert data["status"] == "success"
        assert data["resolved"] == "button-danger"
        assert data["found"] is True
        assert data["available"] == ["primary", "danger", "plain"]

    @pytest.mark.asyncio
    async def test_resolve_missing_variant(self, compilation_tools: dict):
        """Unknown variants are not an error."""
        data = json.loads(
            await compilation_tools["stylesheet_resolve_variant"](
                class_name="button", variant="missing", name="buttons"
            )
        )

        assert data["status"] == "success"
        assert data["resolved"] is None
        assert data["found"] is False

    @pytest.mark.asyncio
    async def test_resolve_variant_unknown_class(self, compilation_tools: dict):
        """Unknown classes are errors."""
        data = json.loads(
            await compilation_tools["stylesheet_resolve_variant"](
                class_name="nope", variant="a", name="buttons"
            )
        )
        assert data["status"] == "error"


class TestStylesheetTools:
    """Tests for stylesheet storage tools."""

    @pytest.mark.asyncio
    async def test_list(self, stylesheet_tools: dict):
        """List library stylesheets."""
        data = json.loads(await stylesheet_tools["stylesheet_list"]())

        assert data["status"] == "success"
        names = {s["name"] for s in data["stylesheets"]}
        assert {"buttons", "layout"} <= names
        assert data["count"] == len(data["stylesheets"])

    @pytest.mark.asyncio
    async def test_describe(self, stylesheet_tools: dict):
        """Describe a stylesheet's classes and variants."""
        data = json.loads(await stylesheet_tools["stylesheet_describe"](name="buttons"))

        assert data["status"] == "success"
        classes = data["stylesheet"]["classes"]
        assert classes["button"]["variants"] == ["primary", "danger", "plain"]
        assert classes["icon"]["variants"] == []
        assert data["stylesheet"]["rule_count"] == 4
        assert "name: buttons" in data["stylesheet"]["yaml"]

    @pytest.mark.asyncio
    async def test_describe_not_found(self, stylesheet_tools: dict):
        """Describing an unknown stylesheet is an error."""
        data = json.loads(await stylesheet_tools["stylesheet_describe"](name="nonexistent"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_copy_to_project(self, stylesheet_tools: dict, temp_dir: Path):
        """Copy a library stylesheet once."""
        data = json.loads(await stylesheet_tools["stylesheet_copy_to_project"](name="layout"))
        assert data["status"] == "success"
        assert Path(data["path"]) == temp_dir / "stylesheets" / "layout.yaml"

        again = json.loads(await stylesheet_tools["stylesheet_copy_to_project"](name="layout"))
        assert again["status"] == "error"

    @pytest.mark.asyncio
    async def test_save_and_list(self, stylesheet_tools: dict):
        """Saved stylesheets show up in listings."""
        data = json.loads(
            await stylesheet_tools["stylesheet_save"](
                name="cards", source="card: {padding: 8px}", description="Cards"
            )
        )
        assert data["status"] == "success"
        assert data["class_count"] == 1

        listed = json.loads(await stylesheet_tools["stylesheet_list"]())
        assert "cards" in {s["name"] for s in listed["stylesheets"]}

    @pytest.mark.asyncio
    async def test_save_rejects_invalid(self, stylesheet_tools: dict, temp_dir: Path):
        """Stylesheets that don't compile are not saved."""
        data = json.loads(
            await stylesheet_tools["stylesheet_save"](name="cards", source="card: {}")
        )
        assert data["status"] == "error"
        assert data["code"] == "empty-block"
        assert not (temp_dir / "stylesheets" / "cards.yaml").exists()

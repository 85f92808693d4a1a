import pytest

from sql2go.schema_reader.types import DEFAULT_GO_TYPES, base_type_name, go_type
from sql2go.shared.errors import UnsupportedTypeError


class TestBaseTypeName:
    @pytest.mark.parametrize(
        "native,expected",
        [
            ("varchar", "varchar"),
            ("varchar(50)", "varchar"),
            ("int(11)", "int"),
            ("int(11) unsigned", "int"),
            ("int unsigned", "int"),
            ("bit(1)", "bit"),
            ("nvarchar(max)", "nvarchar"),
        ],
    )
    def test_base_type_name(self, native, expected):
        assert base_type_name(native) == expected


class TestGoType:
    @pytest.mark.parametrize(
        "native,expected",
        [
            ("int", "int"),
            ("bigint", "int"),
            ("smallint", "int"),
            ("bit", "bool"),
            ("boolean", "bool"),
            ("char", "string"),
            ("nchar", "string"),
            ("varchar", "string"),
            ("nvarchar", "string"),
            ("text", "string"),
            ("date", "time.Time"),
            ("datetime", "time.Time"),
            ("datetime2", "time.Time"),
        ],
    )
    def test_go_type_documented_mappings(self, native, expected):
        assert go_type(native, "col", "tbl") == expected

    @pytest.mark.parametrize("native", sorted(DEFAULT_GO_TYPES))
    def test_sized_variant_maps_like_base(self, native):
        assert go_type(f"{native}(10)", "col", "tbl") == go_type(native, "col", "tbl")

    def test_unsupported_type_names_type_table_and_column(self):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            go_type("money", "total", "invoices")

        error = exc_info.value
        assert error.type_name == "money"
        assert error.table == "invoices"
        assert error.column == "total"
        assert "money" in str(error)
        assert "invoices.total" in str(error)

    def test_unsupported_sized_type_reports_base_name(self):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            go_type("decimal(10,2)", "price", "items")
        assert exc_info.value.type_name == "decimal"

    def test_lookup_is_case_sensitive(self):
        with pytest.raises(UnsupportedTypeError):
            go_type("INT", "id", "users")

from NamePy.Structures.StringArrayName import StringArrayName

def test_source_is_copied():
    source = ["oss", "cs"]
    n = StringArrayName(source)
    source.append("de")
    assert n.get_no_components() == 2

def test_edits_leave_receiver_unchanged():
    n = StringArrayName(["oss", "cs", "fau", "de"], "/")
    m = n.set_component(0, "i4").insert(1, "x").remove(4)
    assert isinstance(m, StringArrayName)
    assert m.components == ("i4", "x", "cs", "fau")
    assert m.get_delimiter_character() == "/"
    assert n.components == ("oss", "cs", "fau", "de")

def test_accepts_tuples():
    n = StringArrayName(("a", "b\\.c"))
    assert n.as_string() == "a.b.c"
    assert n.get_no_components() == 2

def test_repr():
    assert repr(StringArrayName(["a", "b"], "/")) == "StringArrayName('a.b', delimiter='/')"

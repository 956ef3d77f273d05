from drills.packages import Dependency, Language, PackageBuilder, main


def test_builder_defaults():
    package = PackageBuilder("base64").build()
    assert package.name == "base64"
    assert package.version == "0.1"
    assert package.authors == []
    assert package.dependencies == []
    assert package.language is None


def test_builder_sets_version_and_language():
    package = PackageBuilder("log").version("0.4").language(Language.RUST).build()
    assert package.version == "0.4"
    assert package.language is Language.RUST


def test_as_dependency_uses_name_and_version():
    package = PackageBuilder("base64").version("0.13").build()
    assert package.as_dependency() == Dependency("base64", "0.13")


def test_dependencies_are_kept_in_order():
    first = Dependency("base64", "0.13")
    second = Dependency("log", "0.4")
    package = PackageBuilder("serde").dependency(first).dependency(second).build()
    assert package.dependencies == [first, second]


def test_authors_are_replaced():
    package = PackageBuilder("serde").authors(["alice"]).authors(["bob", "carol"]).build()
    assert package.authors == ["bob", "carol"]


def test_built_package_is_independent_of_builder():
    builder = PackageBuilder("serde")
    first = builder.build()
    builder.dependency(Dependency("log", "0.4"))
    assert first.dependencies == []
    assert builder.build().dependencies == [Dependency("log", "0.4")]


def test_main_prints_each_package(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(":", 1)[0] for line in lines] == ["base64", "log", "serde"]
    assert "djmitche" in lines[2]
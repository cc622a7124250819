"""
Тесты рекурсивного преобразования шаблона: подстановка, фильтрация
предикатами и развёртывание коллекций.
"""

import pytest
from lxml import etree

from pojito.context import ConversionContext
from pojito.errors import PropertyResolutionError, UnknownActionError
from pojito.markup import parse_template_text
from pojito.transformer import TreeTransformer
from tests.infrastructure.data_objects import Exploding, Person
from tests.infrastructure.rendering_utils import render


class TestSubstitution:

    def test_round_trip_scenario(self):
        out = render("<root><name>${person.name}</name></root>", {"person": {"name": "Lee"}})
        assert out == "<root><name>Lee</name></root>"

    def test_accessor_objects(self):
        out = render("<p><n>${p.name}</n><a>${p.age}</a></p>", {"p": Person("Ana", age=31)})
        assert out == "<p><n>Ana</n><a>31</a></p>"

    def test_literals_are_kept(self):
        out = render('<root kind="static"><title>Report</title></root>')
        assert out == '<root kind="static"><title>Report</title></root>'

    def test_attributes_are_evaluated(self):
        out = render('<item id="${id}" label="${name;transform=upper}"/>', {"id": 7, "name": "x"})
        assert out == '<item id="7" label="X"/>'

    def test_null_attribute_is_suppressed(self):
        """Атрибут со значением None не выводится вовсе (а не как "None")"""
        out = render('<item id="${missing}" kind="a"/>', {})
        assert out == '<item kind="a"/>'

    def test_null_text_gives_empty_element(self):
        assert render("<root><name>${missing}</name></root>", {}) == "<root><name/></root>"

    def test_text_before_children(self):
        out = render("<a>${x}<b>${y}</b></a>", {"x": "v", "y": "w"})
        assert out == "<a>v<b>w</b></a>"

    def test_comments_are_skipped(self):
        assert render("<root><!-- note --><a>x</a></root>") == "<root><a>x</a></root>"

    def test_template_is_not_mutated(self):
        template = parse_template_text('<root a="${x}"><b>${x}</b></root>')
        before = etree.tostring(template)

        TreeTransformer().transform(template, ConversionContext({"x": "1"}))

        assert etree.tostring(template) == before

    def test_errors_propagate(self):
        with pytest.raises(UnknownActionError):
            render('<root a="${x;bogus=1}"/>', {"x": 1})
        with pytest.raises(PropertyResolutionError):
            render("<root><v>${p.salary}</v></root>", {"p": Person("Ana")})


class TestPredicates:

    def test_false_predicate_discards_subtree(self):
        """Отброшенный узел не выводится, его дети не посещаются"""
        template = """
        <root>
          <item ifNotNull="${missing}"><child>${boom.boom}</child></item>
          <kept/>
        </root>
        """
        out = render(template, {"boom": Exploding()})
        assert out == "<root><kept/></root>"

    def test_predicates_run_before_text(self):
        out = render('<root><item ifNotNull="${missing}">${boom.boom}</item></root>', {"boom": Exploding()})
        assert out == "<root/>"

    def test_first_failing_predicate_wins(self):
        """Атрибуты после ложного предиката не вычисляются"""
        out = render(
            '<root><item ifNotNull="${missing}" label="${boom.boom}"/></root>',
            {"boom": Exploding()},
        )
        assert out == "<root/>"

    def test_true_predicate_attribute_is_not_copied(self):
        out = render('<root><item ifNotNull="${x}" id="1">${x}</item></root>', {"x": "v"})
        assert out == '<root><item id="1">v</item></root>'

    def test_root_can_be_discarded(self):
        assert render('<root ifNotNull="${missing}"/>', {}) is None

    def test_user_predicate_overrides_builtin(self):
        out = render(
            '<root><item ifNotNull="${missing}"/></root>', {},
            predicates={"ifNotNull": lambda value: True},
        )
        assert out == "<root><item/></root>"

    def test_custom_predicate(self):
        template = '<root><adult ifAdult="${p.age}">${p.name}</adult></root>'
        predicates = {"ifAdult": lambda age: age >= 18}

        assert render(template, {"p": Person("Ana", age=31)}, predicates=predicates) == \
            "<root><adult>Ana</adult></root>"
        assert render(template, {"p": Person("Kid", age=9)}, predicates=predicates) == "<root/>"

    def test_if_not_empty_gates_list(self):
        template = '<root><list ifNotEmpty="${items}">${items}<i>${.}</i></list></root>'

        assert render(template, {"items": ["a"]}) == "<root><list><i>a</i></list></root>"
        assert render(template, {"items": []}) == "<root/>"


class TestCollectionExpansion:

    TEMPLATE = '<root><rows>${items}<row id="${.}"/></rows></root>'

    def test_one_subtree_per_element(self):
        out = render(self.TEMPLATE, {"items": ["A", "B"]})
        assert out == '<root><rows><row id="A"/><row id="B"/></rows></root>'

    @pytest.mark.parametrize("data", [{"items": []}, {"items": None}, {}])
    def test_empty_or_null_collection_gives_no_rows(self, data):
        assert render(self.TEMPLATE, data) == "<root><rows/></root>"

    def test_whole_child_list_is_repeated(self):
        template = "<people>${people}<name>${name}</name><age>${age}</age></people>"
        people = [Person("Ana", age=31), Person("Bo", age=40)]

        out = render(template, {"people": people})

        assert out == (
            "<people><name>Ana</name><age>31</age>"
            "<name>Bo</name><age>40</age></people>"
        )

    def test_tuples_and_sets_expand(self):
        assert render(self.TEMPLATE, {"items": ("x",)}) == '<root><rows><row id="x"/></rows></root>'
        assert render(self.TEMPLATE, {"items": {"y"}}) == '<root><rows><row id="y"/></rows></root>'

    def test_strings_and_maps_do_not_expand(self):
        out = render("<root><v>${s}</v></root>", {"s": "abc"})
        assert out == "<root><v>abc</v></root>"

    def test_predicates_inside_expansion(self):
        template = '<root>${people}<p ifAdult="${age}">${name}</p></root>'
        people = [Person("Ana", age=31), Person("Kid", age=9), Person("Bo", age=40)]

        out = render(template, {"people": people}, predicates={"ifAdult": lambda a: a >= 18})

        assert out == "<root><p>Ana</p><p>Bo</p></root>"

    def test_nested_collections(self):
        template = """
        <root>
          <groups>${groups}<group name="${name}">${members}<member>${.}</member></group></groups>
        </root>
        """
        groups = [
            {"name": "g1", "members": ["a", "b"]},
            {"name": "g2", "members": ["c"]},
        ]

        out = render(template, {"groups": groups})

        assert out == (
            "<root><groups>"
            '<group name="g1"><member>a</member><member>b</member></group>'
            '<group name="g2"><member>c</member></group>'
            "</groups></root>"
        )

    def test_outer_element_restored_after_nested_expansion(self):
        """После внутреннего развёртывания выражения снова видят элемент внешнего"""
        template = (
            "<root><groups>${groups}"
            "<group>${members}<member>${.}</member></group>"
            "<label>${name}</label>"
            "</groups><total>${total}</total></root>"
        )
        data = {
            "total": 2,
            "groups": [
                {"name": "g1", "members": ["a", "b"]},
                {"name": "g2", "members": ["c"]},
            ],
        }

        out = render(template, data)

        assert out == (
            "<root><groups>"
            "<group><member>a</member><member>b</member></group><label>g1</label>"
            "<group><member>c</member></group><label>g2</label>"
            "</groups><total>2</total></root>"
        )

    def test_collection_from_accessor(self):
        template = "<p>${p.nicknames}<nick>${.;transform=upper}</nick></p>"
        out = render(template, {"p": Person("Ana", nicknames=["an", "nan"])})
        assert out == "<p><nick>AN</nick><nick>NAN</nick></p>"

    def test_all_expanded_children_discarded_falls_back_to_outer_root(self):
        """Если предикаты отбросили все повторённые узлы, дети обходятся ещё раз от внешнего корня"""
        template = '<root>${items}<row ifNotNull="${flag}" id="${id}"/></root>'
        data = {"items": [{"flag": None, "id": 1}], "flag": "top", "id": 9}

        assert render(template, data) == '<root><row id="9"/></root>'

    def test_partial_discard_has_no_fallback(self):
        template = '<root>${items}<row ifNotNull="${flag}" id="${id}"/></root>'
        data = {
            "items": [{"flag": None, "id": 1}, {"flag": "on", "id": 2}],
            "flag": "top",
            "id": 9,
        }

        assert render(template, data) == '<root><row id="2"/></root>'

    def test_null_expression_before_children_drops_them(self):
        """Выражение со значением None перед дочерними узлами ведёт себя как отсутствующая коллекция"""
        template = "<p>${nick}<name>${name}</name></p>"

        assert render(template, {"nick": None, "name": "Ana"}) == "<p/>"
        assert render(template, {"nick": "an", "name": "Ana"}) == "<p>an<name>Ana</name></p>"

    def test_literal_text_before_children_keeps_them(self):
        assert render("<p>Hi<name>${name}</name></p>", {"name": "Ana"}) == "<p>Hi<name>Ana</name></p>"


class TestNamespaces:

    NS = "urn:example:x"

    def test_namespaced_names_are_copied(self):
        template = (
            f'<root xmlns:x="{self.NS}">'
            '<x:item x:id="${id}">${name}</x:item>'
            "</root>"
        )

        out = render(template, {"id": 7, "name": "Ana"})
        root = etree.fromstring(out)
        item = root[0]

        assert root.nsmap == {"x": self.NS}
        assert item.tag == f"{{{self.NS}}}item"
        assert item.get(f"{{{self.NS}}}id") == "7"
        assert item.text == "Ana"
        assert out.count(f'xmlns:x="{self.NS}"') == 1

    def test_namespace_declared_on_inner_element_is_kept(self):
        template = f'<root><x:item xmlns:x="{self.NS}"/></root>'

        assert render(template) == f'<root><x:item xmlns:x="{self.NS}"/></root>'

    def test_prefixed_predicate_attribute_uses_local_name(self):
        template = (
            f'<root xmlns:x="{self.NS}">'
            '<item x:ifNotNull="${missing}"/>'
            '<kept x:ifNotNull="${v}" id="1"/>'
            "</root>"
        )

        out = render(template, {"v": "yes"})

        assert out == f'<root xmlns:x="{self.NS}"><kept id="1"/></root>'

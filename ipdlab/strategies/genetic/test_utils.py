"""Tests for gene id generation, cloning, and canonical forms."""

import re
from dataclasses import replace

from ...core.types import Move
from .genome import Gene, GeneCondition, GeneticStrategyConfig
from .utils import (
    GeneIdGenerator,
    canonicalize_config,
    canonicalize_config_map,
    clone_genetic_config,
    clone_genetic_config_map,
    create_gene_id,
    create_gene_template,
    ensure_gene_ids,
    genomes_equal,
)

BASE_CONFIG = GeneticStrategyConfig(
    name="Test Config",
    description="Example configuration to verify cloning.",
    genome=[
        Gene(id="g-1", response=Move.COOPERATE),
        Gene(
            id="g-2",
            condition=GeneCondition(opponent_last_move=Move.DEFECT, round_range=(2, 4)),
            response=Move.DEFECT,
            weight=1.2,
        ),
    ],
)


class TestGeneIds:
    """Tests for gene id generation."""

    def test_module_ids_are_unique(self):
        first = create_gene_id()
        second = create_gene_id()
        assert first != second
        assert first.startswith("gene-")
        assert second.startswith("gene-")

    def test_generator_format(self):
        generator = GeneIdGenerator(prefix="rule", random_source=lambda: 0.0)
        assert generator() == "rule-1-00000"
        assert re.fullmatch(r"rule-2-0{5}", generator())

    def test_generators_do_not_share_counters(self):
        a = GeneIdGenerator(random_source=lambda: 0.5)
        b = GeneIdGenerator(random_source=lambda: 0.5)
        a()
        assert a() != b()


class TestCreateGeneTemplate:
    """Tests for create_gene_template."""

    def test_defaults(self):
        gene = create_gene_template()
        assert gene.id
        assert gene.response is Move.COOPERATE
        assert gene.condition == GeneCondition()
        assert gene.weight is None

    def test_overrides(self):
        gene = create_gene_template(
            condition=GeneCondition(opponent_last_move="DEFECT", round_range=[1, 3]),
            response="DEFECT",
            weight=1.25,
        )
        assert gene.id
        assert gene.condition.opponent_last_move is Move.DEFECT
        assert gene.condition.round_range == (1, 3)
        assert gene.response is Move.DEFECT
        assert gene.weight == 1.25


class TestEnsureGeneIds:
    """Tests for ensure_gene_ids."""

    def test_fills_missing_ids(self):
        genome = ensure_gene_ids([
            Gene(id="existing"),
            Gene(condition=GeneCondition(self_last_move=Move.DEFECT), response=Move.DEFECT),
        ])
        assert len(genome) == 2
        assert genome[0].id == "existing"
        assert genome[1].id.startswith("gene-")
        assert genome[1].condition.self_last_move is Move.DEFECT

    def test_custom_generator(self):
        genome = ensure_gene_ids([Gene()], generator=lambda: "fixed")
        assert genome[0].id == "fixed"


class TestCloneGeneticConfig:
    """Tests for config cloning."""

    def test_clone_is_independent(self):
        cloned = clone_genetic_config(BASE_CONFIG)
        assert cloned is not BASE_CONFIG
        assert cloned.genome is not BASE_CONFIG.genome
        assert cloned == BASE_CONFIG

        cloned.genome[0] = replace(cloned.genome[0], response=Move.DEFECT)
        assert BASE_CONFIG.genome[0].response is Move.COOPERATE

    def test_clone_fills_missing_ids_from_given_generator(self):
        config = GeneticStrategyConfig(name="Bare", description="", genome=[Gene(), Gene(id="kept")])
        cloned = clone_genetic_config(config, generator=lambda: "filled")
        assert [gene.id for gene in cloned.genome] == ["filled", "kept"]

    def test_clone_map(self):
        configs = clone_genetic_config_map({BASE_CONFIG.name: BASE_CONFIG})
        assert configs[BASE_CONFIG.name] == BASE_CONFIG
        assert configs[BASE_CONFIG.name] is not BASE_CONFIG


class TestCanonicalForms:
    """Tests for canonicalize_config and friends."""

    CONFIG = GeneticStrategyConfig(
        name="Canon",
        description="Canonical config",
        mutation_rate=0.2,
        crossover_rate=0.7,
        genome=[
            create_gene_template(id="gene-A", response=Move.COOPERATE),
            create_gene_template(
                id="gene-B",
                response=Move.DEFECT,
                weight=1.5,
                condition=GeneCondition(opponent_last_move=Move.DEFECT, round_range=(2, 5)),
            ),
        ],
    )

    def test_explicit_nones(self):
        assert canonicalize_config(self.CONFIG) == {
            "name": "Canon",
            "description": "Canonical config",
            "mutation_rate": 0.2,
            "crossover_rate": 0.7,
            "genome": [
                {
                    "id": "gene-A",
                    "response": "COOPERATE",
                    "weight": None,
                    "condition": {
                        "opponent_last_move": None,
                        "self_last_move": None,
                        "round_range": None,
                    },
                },
                {
                    "id": "gene-B",
                    "response": "DEFECT",
                    "weight": 1.5,
                    "condition": {
                        "opponent_last_move": "DEFECT",
                        "self_last_move": None,
                        "round_range": [2, 5],
                    },
                },
            ],
        }

    def test_maps_compare_structurally(self):
        copy = replace(self.CONFIG, genome=[replace(gene) for gene in self.CONFIG.genome])
        assert canonicalize_config_map({"canon": self.CONFIG}) == canonicalize_config_map(
            {"canon": copy}
        )

    def test_genomes_equal(self):
        genome = self.CONFIG.genome
        assert genomes_equal(genome, list(genome))
        assert not genomes_equal(genome, genome[:1])
        assert not genomes_equal(genome, [genome[0], replace(genome[1], weight=2.0)])

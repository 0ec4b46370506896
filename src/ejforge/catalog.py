"""Templates for the files of a generated ejabberd project."""

from __future__ import annotations

from typing import Any, Mapping

from .models import RenderedFile, ResolvedParameters, TemplateDescriptor
from .template import TemplateRenderer
from .variants import ConfigVariant, EntryVariant, select_variants

__all__ = [
    "CONFIG_FILES",
    "applications_fragment",
    "build_context",
    "render",
    "templates_for",
]


README_TEMPLATE = """# {{ mod }}

An ejabberd project.

## Getting started

Fetch the dependencies and start ejabberd with the project loaded:

    $ mix deps.get
    $ iex -S mix

ejabberd reads its settings from `config/{{ config_file }}`. Edit that file
to enable modules or to change a configuration parameter.

## Tests

    $ mix test

See https://docs.ejabberd.im/ for the ejabberd documentation.
"""

GITIGNORE_TEMPLATE = """/_build
/deps
/logs/*
/mnesiadb
erl_crash.dump
*.ez
"""

MIXFILE_TEMPLATE = """defmodule {{ mod }}.Mixfile do
  use Mix.Project

  def project do
    [app: {{ app|atom }},
     version: "0.0.1",
     elixir: "~> {{ version }}",
     build_embedded: Mix.env == :prod,
     start_permanent: Mix.env == :prod,
     deps: deps]
  end

  # Configuration for the OTP application
  #
  # Type "mix help compile.app" for more information
  def application do
{{ applications }}
  end

  # Type "mix help deps" for more examples and options
  defp deps do
    [{:ejabberd, "~> {{ ejabberd_version }}"}]
  end
end
"""

CONFIG_TEMPLATE = """use Mix.Config

config :ejabberd,
  file: {{ config_path|inspect }},
  log_path: 'logs/ejabberd.log'

config :mnesia,
  dir: 'mnesiadb/'
"""

CONFIG_EJABBERD_TEMPLATE = """defmodule Ejabberd.ConfigFile do
  use Ejabberd.Config

  def start do
    [loglevel: 4,
     log_rotate_size: 10485760,
     log_rotate_date: "",
     log_rotate_count: 1,
     log_rate_limit: 100,
     auth_method: :internal,
     max_fsm_queue: 1000,
     language: "en",
     allow_contrib_modules: true,
     hosts: ["localhost"],
     shaper: shaper,
     acl: acl,
     access: access]
  end

  defp shaper do
    [normal: 1000,
     fast: 50000]
  end

  defp acl do
    [local: [user_regexp: ""],
     loopback: [ip: ["127.0.0.0/8"]]]
  end

  defp access do
    [c2s: [blocked: :deny, all: :allow],
     c2s_shaper: [admin: :none, all: :normal],
     s2s_shaper: [all: :fast],
     announce: [admin: :allow],
     configure: [admin: :allow],
     local: [local: :allow],
     register: [all: :allow]]
  end

  listen :ejabberd_c2s do
    @opts [
      port: 5222,
      max_stanza_size: 65536,
      shaper: :c2s_shaper,
      access: :c2s]
  end

  listen :ejabberd_s2s_in do
    @opts [port: 5269]
  end

  listen :ejabberd_http do
    @opts [
      port: 5280,
      web_admin: true,
      http_bind: true,
      captcha: true]
  end

  module :mod_adhoc do
  end

  module :mod_announce do
    @opts [access: :announce]
  end

  module :mod_caps do
  end

  module :mod_disco do
  end

  module :mod_last do
  end

  module :mod_offline do
    @opts [access_max_user_messages: :max_user_offline_messages]
  end

  module :mod_ping do
  end

  module :mod_privacy do
  end

  module :mod_private do
  end

  module :mod_roster do
  end

  module :mod_vcard do
  end
end
"""

CONFIG_EJABBERD_YML_TEMPLATE = """###
###              ejabberd configuration file
###

loglevel: 4
log_rotate_size: 10485760
log_rotate_date: ""
log_rotate_count: 1
log_rate_limit: 100

hosts:
  - "localhost"

listen:
  -
    port: 5222
    module: ejabberd_c2s
    max_stanza_size: 65536
    shaper: c2s_shaper
    access: c2s
  -
    port: 5269
    module: ejabberd_s2s_in
  -
    port: 5280
    module: ejabberd_http
    web_admin: true
    http_bind: true
    captcha: true

auth_method: internal

shaper:
  normal: 1000
  fast: 50000

max_fsm_queue: 1000

acl:
  local:
    user_regexp: ""
  loopback:
    ip:
      - "127.0.0.0/8"

access:
  max_user_sessions:
    all: 10
  max_user_offline_messages:
    admin: 5000
    all: 100
  local:
    local: allow
  c2s:
    blocked: deny
    all: allow
  c2s_shaper:
    admin: none
    all: normal
  s2s_shaper:
    all: fast
  announce:
    admin: allow
  configure:
    admin: allow
  register:
    all: allow

language: "en"

modules:
  mod_adhoc: {}
  mod_announce:
    access: announce
  mod_caps: {}
  mod_disco: {}
  mod_last: {}
  mod_offline:
    access_max_user_messages: max_user_offline_messages
  mod_ping: {}
  mod_privacy: {}
  mod_private: {}
  mod_roster: {}
  mod_vcard: {}

allow_contrib_modules: true
"""

LIB_TEMPLATE = """defmodule {{ mod }} do
  use Ejabberd.Module

  def start(_host, _opts) do
    info("Starting ejabberd module {{ mod }}")
    :ok
  end

  def stop(_host) do
    info("Stopping ejabberd module {{ mod }}")
    :ok
  end
end
"""

LIB_SUP_TEMPLATE = """defmodule {{ mod }} do
  use Application

  # See http://elixir-lang.org/docs/stable/elixir/Application.html
  # for more information on OTP Applications
  def start(_type, _args) do
    import Supervisor.Spec, warn: false

    children = [
      # Define workers and child supervisors to be supervised
      # worker({{ mod }}.Worker, [arg1, arg2, arg3]),
    ]

    # See http://elixir-lang.org/docs/stable/elixir/Supervisor.html
    # for other strategies and supported options
    opts = [strategy: :one_for_one, name: {{ mod }}.Supervisor]
    Supervisor.start_link(children, opts)
  end
end
"""

TEST_HELPER_TEMPLATE = """ExUnit.start()
"""

TEST_TEMPLATE = """defmodule {{ mod }}Test do
  use ExUnit.Case
  doctest {{ mod }}

  test "the truth" do
    assert 1 + 1 == 2
  end
end
"""


README = TemplateDescriptor(name="readme", output_path="README.md", body=README_TEMPLATE)
GITIGNORE = TemplateDescriptor(name="gitignore", output_path=".gitignore", body=GITIGNORE_TEMPLATE)
MIXFILE = TemplateDescriptor(name="mixfile", output_path="mix.exs", body=MIXFILE_TEMPLATE)
CONFIG = TemplateDescriptor(name="config", output_path="config/config.exs", body=CONFIG_TEMPLATE)
CONFIG_EJABBERD = TemplateDescriptor(
    name="config_ejabberd",
    output_path="config/ejabberd.exs",
    body=CONFIG_EJABBERD_TEMPLATE,
)
CONFIG_EJABBERD_YML = TemplateDescriptor(
    name="config_ejabberd_yml",
    output_path="config/ejabberd.yml",
    body=CONFIG_EJABBERD_YML_TEMPLATE,
)
LIB = TemplateDescriptor(name="lib", output_path="lib/{{ app }}.ex", body=LIB_TEMPLATE)
LIB_SUP = TemplateDescriptor(name="lib_sup", output_path="lib/{{ app }}.ex", body=LIB_SUP_TEMPLATE)
TEST_HELPER = TemplateDescriptor(
    name="test_helper",
    output_path="test/test_helper.exs",
    body=TEST_HELPER_TEMPLATE,
)
TEST = TemplateDescriptor(name="test", output_path="test/{{ app }}_test.exs", body=TEST_TEMPLATE)

CONFIG_FILES: Mapping[ConfigVariant, TemplateDescriptor] = {
    ConfigVariant.STRUCTURED: CONFIG_EJABBERD,
    ConfigVariant.LEGACY: CONFIG_EJABBERD_YML,
}
ENTRY_FILES: Mapping[EntryVariant, TemplateDescriptor] = {
    EntryVariant.PLAIN: LIB,
    EntryVariant.SUPERVISED: LIB_SUP,
}

_RENDERER = TemplateRenderer()


def templates_for(entry: EntryVariant, config: ConfigVariant) -> tuple[TemplateDescriptor, ...]:
    """Return the descriptors to render, in the order they are written."""

    return (
        README,
        GITIGNORE,
        MIXFILE,
        CONFIG,
        CONFIG_FILES[config],
        ENTRY_FILES[entry],
        TEST_HELPER,
        TEST,
    )


def applications_fragment(module_name: str, entry: EntryVariant) -> str:
    """Return the ``application/0`` body listing the runtime dependencies."""

    if entry is EntryVariant.SUPERVISED:
        return f"    [applications: [:logger, :ejabberd],\n     mod: {{{module_name}, []}}]"
    return "    [applications: [:logger, :ejabberd]]"


def build_context(parameters: ResolvedParameters) -> dict[str, Any]:
    """Return the placeholder values for ``parameters``."""

    entry, config = select_variants(parameters.include_supervisor, parameters.legacy_config_format)
    config_file = CONFIG_FILES[config].output_path.rsplit("/", 1)[-1]
    return {
        "app": parameters.app_name,
        "mod": parameters.module_name,
        "version": parameters.short_version,
        "ejabberd_version": parameters.dependency_version,
        "applications": applications_fragment(parameters.module_name, entry),
        "config_file": config_file,
        "config_path": f"config/{config_file}",
    }


def render(
    descriptor: TemplateDescriptor,
    parameters: ResolvedParameters,
    renderer: TemplateRenderer | None = None,
) -> RenderedFile:
    """Render the output path and body of ``descriptor``.

    Any placeholder the context does not provide raises
    :class:`~ejforge.template.TemplateRenderingError`.
    """

    renderer = renderer or _RENDERER
    context = build_context(parameters)
    return RenderedFile(
        relative_path=renderer.render_string(descriptor.output_path, context),
        content=renderer.render_string(descriptor.body, context),
    )

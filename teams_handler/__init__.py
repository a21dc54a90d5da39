"""Handler do Sensu que publica eventos como cards no Microsoft Teams.

Este pacote contém:
- constants: variáveis de ambiente, limites e tabelas de status
- status: label/cor/ícone por status do check
- utils: truncamento de texto e formatação de horários
- events: leitura do evento do Sensu
- config: configuração imutável, validação e overrides por annotation
- formatters: renderização dos cards (adaptive card e message card)
- services: envio ao webhook do Teams
- handler: fluxo validar -> renderizar -> enviar
- cli / controller: entradas via stdin e via HTTP (Flask)
"""

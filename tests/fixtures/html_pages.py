"""검색 결과 페이지 HTML 자산

실제 마크업 구조를 축약한 형태입니다.
"""

DUCKDUCKGO_RESULTS_HTML = """
<html><body>
  <div class="results">
    <div class="result results_links results_links_deep web-result">
      <div class="links_main links_deep result__body">
        <h2 class="result__title">
          <a rel="nofollow" class="result__a"
             href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fwww.gob.mx%2Fsep%2Fbecas&rut=abc">Becas <b>SEP</b> 2024</a>
        </h2>
        <a class="result__snippet" href="#">Convocatorias de   becas para
          estudiantes de educación básica.</a>
      </div>
    </div>
    <div class="result results_links web-result">
      <h2 class="result__title">
        <a class="result__a" href="/l/?kh=-1&uddg=https%3A%2F%2Fwww.unam.mx%2Fbecas%3Fa%3D1">UNAM Becas</a>
      </h2>
      <div class="result__snippet">Programa de becas UNAM.</div>
    </div>
    <div class="result web-result">
      <h2 class="result__title"><a class="result__a" href="https://www.ipn.mx/becas/">IPN</a></h2>
      <div class="result__snippet">Becas institucionales del IPN.</div>
    </div>
    <div class="result web-result">
      <a href="https://www.tec.mx/becas">Tec de Monterrey becas</a>
    </div>
    <div class="result web-result result--no-link">
      <span>Sin enlace</span>
    </div>
  </div>
</body></html>
"""

DUCKDUCKGO_EMPTY_HTML = """
<html><body><div class="no-results">No results.</div></body></html>
"""

BING_RESULTS_HTML = """
<html><body>
  <ol id="b_results">
    <li class="b_algo">
      <h2><a href="https://www.sep.gob.mx/calendario">Calendario escolar SEP</a></h2>
      <div class="b_caption"><p>Consulta el calendario escolar oficial.</p></div>
    </li>
    <li class="b_algo">
      <h2><a href="https://www.uam.mx/inscripciones">Inscripciones UAM</a></h2>
      <div class="b_caption"><p>Proceso de inscripción.</p></div>
    </li>
    <li class="b_algo">
      <h2><a href="">Sin url</a></h2>
    </li>
    <li class="b_ad">
      <h2><a href="https://ads.example.com">Anuncio</a></h2>
    </li>
    <li class="b_algo">
      <h2><a href="https://www.uady.mx/">UADY</a></h2>
    </li>
  </ol>
</body></html>
"""
